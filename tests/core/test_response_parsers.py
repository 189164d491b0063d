"""
Test suite for Claude response parsing.

Covers JSON resource arrays (bare and wrapped in prose), the line-oriented
fallback scraper and comma-separated tag answers.

System role: Verification of LLM output post-processing
"""

import json

from coachdesk.core.ai.response_parsers import (
    parse_resources,
    parse_resources_from_json,
    parse_resources_from_text,
    parse_tags,
)


class TestParseResourcesFromJson:
    """Test suite for the JSON resource parser."""

    def test_should_parse_bare_json_array(self) -> None:
        text = json.dumps(
            [
                {
                    "title": "Radical Candor",
                    "type": "book",
                    "url": "https://radicalcandor.com",
                    "description": "Feedback framework",
                    "tags": ["feedback", "leadership"],
                }
            ]
        )

        resources = parse_resources_from_json(text)

        assert len(resources) == 1
        assert resources[0].title == "Radical Candor"
        assert resources[0].type == "book"
        assert resources[0].url == "https://radicalcandor.com"
        assert resources[0].tags == ["feedback", "leadership"]

    def test_should_find_array_inside_prose(self) -> None:
        text = 'Here are my picks:\n[{"title": "SBI Model"}]\nHope this helps.'

        resources = parse_resources_from_json(text)

        assert [r.title for r in resources] == ["SBI Model"]

    def test_should_apply_defaults_for_missing_fields(self) -> None:
        resources = parse_resources_from_json('[{"title": "GROW"}]')

        assert resources[0].type == "article"
        assert resources[0].url is None
        assert resources[0].description == ""
        assert resources[0].tags == []

    def test_should_keep_only_first_three(self) -> None:
        text = json.dumps([{"title": f"Resource {i}"} for i in range(5)])

        resources = parse_resources_from_json(text)

        assert [r.title for r in resources] == ["Resource 0", "Resource 1", "Resource 2"]

    def test_should_drop_entries_without_title(self) -> None:
        text = json.dumps([{"type": "tool"}, "junk", {"title": "Kept"}])

        resources = parse_resources_from_json(text)

        assert [r.title for r in resources] == ["Kept"]

    def test_should_return_empty_for_non_json(self) -> None:
        assert parse_resources_from_json("No resources today.") == []

    def test_should_return_empty_for_empty_array(self) -> None:
        assert parse_resources_from_json("[]") == []

    def test_should_return_empty_for_json_object(self) -> None:
        assert parse_resources_from_json('{"title": "Not a list"}') == []


class TestParseResourcesFromText:
    """Test suite for the line-oriented fallback parser."""

    def test_should_parse_numbered_list_with_details(self) -> None:
        text = (
            "1. The First 90 Days\n"
            "Type: book\n"
            "URL: https://example.com/first-90\n"
            "Description: Transition playbook for new leaders\n"
            "2. Stakeholder Map\n"
            "Format: worksheet\n"
            "https://example.com/map\n"
        )

        resources = parse_resources_from_text(text)

        assert [r.title for r in resources] == ["The First 90 Days", "Stakeholder Map"]
        assert resources[0].type == "book"
        assert resources[0].url == "https://example.com/first-90"
        assert resources[0].description == "Transition playbook for new leaders"
        assert resources[1].type == "worksheet"
        assert resources[1].url == "https://example.com/map"

    def test_should_accept_title_keyword_lines(self) -> None:
        text = "Title: Crucial Conversations\nWhy: Addresses the conflict with the CFO"

        resources = parse_resources_from_text(text)

        assert resources[0].title == "Crucial Conversations"
        assert resources[0].description == "Addresses the conflict with the CFO"

    def test_should_use_first_free_line_as_description(self) -> None:
        text = "- Delegation Poker\nA card game for clarifying decision rights\nSecond line ignored"

        resources = parse_resources_from_text(text)

        assert resources[0].description == "A card game for clarifying decision rights"

    def test_should_ignore_lines_before_first_item(self) -> None:
        text = "Here are some ideas:\n* Eisenhower Matrix"

        resources = parse_resources_from_text(text)

        assert [r.title for r in resources] == ["Eisenhower Matrix"]

    def test_should_cap_at_three(self) -> None:
        text = "\n".join(f"- Item {i}" for i in range(6))

        assert len(parse_resources_from_text(text)) == 3


class TestParseResources:
    """Test suite for the combined resource parser."""

    def test_should_prefer_json(self) -> None:
        text = '[{"title": "From JSON", "type": "video"}]'

        resources = parse_resources(text)

        assert resources[0].title == "From JSON"
        assert resources[0].type == "video"

    def test_should_fall_back_to_text(self) -> None:
        resources = parse_resources("1. From text\nType: tool")

        assert resources[0].title == "From text"
        assert resources[0].type == "tool"

    def test_should_return_empty_for_blank_answer(self) -> None:
        assert parse_resources("") == []


class TestParseTags:
    """Test suite for tag answer parsing."""

    def test_should_split_trim_and_lowercase(self) -> None:
        assert parse_tags("Leadership,  Team Management , delegation") == [
            "leadership",
            "team management",
            "delegation",
        ]

    def test_should_drop_empty_entries(self) -> None:
        assert parse_tags("feedback,, ,goals,") == ["feedback", "goals"]

    def test_should_return_empty_for_blank_answer(self) -> None:
        assert parse_tags("") == []
