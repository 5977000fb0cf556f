"""Tests for the preview renderer."""

from __future__ import annotations

import pytest

from prat_resume.constants import DENSITY_TOKENS, ZOOM_MAX, ZOOM_MIN
from prat_resume.models import demo_document, empty_document
from prat_resume.rendering import clamp_zoom, render, safe_link
from prat_resume.services.editor import (
    add_education,
    add_experience,
    add_skill,
    apply_summary,
    set_theme_color,
    toggle_density,
    update_personal_info,
)


def _texts(node) -> list[str]:
    return [n.text for n in node.walk() if n.text]


class TestZoom:
    @pytest.mark.parametrize(
        ("zoom", "expected"),
        [(0.1, ZOOM_MIN), (0.8, 0.8), (1.0, 1.0), (3.0, ZOOM_MAX)],
    )
    def test_clamp(self, zoom: float, expected: float) -> None:
        assert clamp_zoom(zoom) == expected

    def test_zoom_only_changes_the_scale(self) -> None:
        document = demo_document()

        small = render(document, 0.5)
        large = render(document, 1.2)

        assert small.content == large.content
        assert small.scale == 0.5
        assert large.scale == 1.2
        assert small.transform == "scale(0.5)"

    def test_print_target_is_scale_invariant(self) -> None:
        document = demo_document()

        first = render(document, 0.4, for_print=True)
        second = render(document, 1.5, for_print=True)

        assert first == second
        assert first.scale == 1.0
        assert first.transform is None
        assert first.content == render(document, 0.7).content


class TestSections:
    def test_new_experience_entry_scenario(self) -> None:
        document = add_experience(empty_document(), company="Acme", job_title="Engineer")

        tree = render(document)
        experience = tree.section("experience")

        assert experience is not None
        entry = experience.find("entry")
        assert entry.child("entry_heading").text == "Engineer"
        assert entry.child("subheading").text == "Acme"
        assert tree.section("education") is None

    def test_profile_appears_once_summary_is_applied(self) -> None:
        document = empty_document()
        assert render(document).section("profile") is None

        document = apply_summary(document, "X")
        profile = render(document).section("profile")

        assert profile is not None
        assert profile.find("paragraph").text == "X"

    def test_empty_document_renders_placeholders_and_no_sections(self) -> None:
        tree = render(empty_document())

        assert tree.content.find("name").text == "Your Name"
        assert tree.content.find("title").text == "Professional Title"
        assert tree.content.find_all("section") == []
        assert tree.content.find("contacts").children == ()

    def test_section_order_and_columns(self) -> None:
        tree = render(demo_document())
        primary = tree.content.find("column", key="primary")
        secondary = tree.content.find("column", key="secondary")

        assert [s.key for s in primary.children] == ["profile", "experience", "education"]
        assert [s.key for s in secondary.children] == ["skills"]
        assert [c.text for c in secondary.find("skill_list").children][:2] == [
            "Figma",
            "Prototyping",
        ]

    def test_entries_are_keyed_by_id(self) -> None:
        document = demo_document()
        tree = render(document)

        keys = [e.key for e in tree.section("experience").find_all("entry")]

        assert keys == [e.id for e in document.experience]

    def test_education_grade_is_optional(self) -> None:
        document = add_education(empty_document(), school="MIT", degree="BSc")
        document = add_education(document, school="ETH", degree="MSc", grade="5.5")

        entries = render(document).section("education").find_all("entry")

        assert entries[0].child("grade") is None
        assert entries[1].child("grade").text == "Grade: 5.5"

    def test_date_range_is_joined(self) -> None:
        document = add_experience(
            empty_document(), job_title="Dev", start_date="01/2020", end_date="Present"
        )

        entry = render(document).section("experience").find("entry")

        assert entry.child("date_range").text == "01/2020 - Present"

    def test_description_keeps_line_breaks(self) -> None:
        document = add_experience(empty_document(), description="- One\n- Two")

        description = render(document).content.find("description")

        assert description.text == "- One\n- Two"
        assert description.style["white_space"] == "pre-line"


class TestHeader:
    def test_contacts_and_links(self) -> None:
        document = empty_document()
        document = update_personal_info(document, "email", "ada@example.com")
        document = update_personal_info(document, "link", "github.com/ada")

        contacts = render(document).content.find("contacts").children

        assert [c.key for c in contacts] == ["email", "link"]
        assert contacts[0].href == "mailto:ada@example.com"
        assert contacts[1].href == "https://github.com/ada"

    @pytest.mark.parametrize(
        ("link", "expected"),
        [
            ("example.com", "https://example.com"),
            ("http://example.com", "http://example.com"),
            ("https://example.com/a", "https://example.com/a"),
        ],
    )
    def test_safe_link(self, link: str, expected: str) -> None:
        assert safe_link(link) == expected


class TestPresentation:
    def test_theme_color_reaches_headings_and_footer(self) -> None:
        document = set_theme_color(add_skill(empty_document(), name="Go"), "#16a34a")
        content = render(document).content

        assert content.find("name").style["color"] == "#16a34a"
        assert content.find("section_heading").style["color"] == "#16a34a"
        assert content.find("footer_bar").style["background"] == "#16a34a"

    def test_density_changes_tokens_not_content(self) -> None:
        comfortable = demo_document()
        compact = toggle_density(comfortable)

        roomy = render(comfortable).content
        tight = render(compact).content

        assert _texts(roomy) == _texts(tight)
        assert roomy.find("body").style["padding_mm"] == (
            DENSITY_TOKENS["comfortable"]["body_padding_mm"]
        )
        assert tight.find("body").style["padding_mm"] == (
            DENSITY_TOKENS["compact"]["body_padding_mm"]
        )

    def test_render_is_deterministic(self) -> None:
        document = demo_document()
        assert render(document, 0.9) == render(document, 0.9)

    def test_to_dict_is_json_friendly(self) -> None:
        data = render(demo_document(), 0.8).to_dict()

        assert data["scale"] == 0.8
        assert data["forPrint"] is False
        assert data["content"]["kind"] == "page"
