"""Tests for the prompt renderer and the flow templates."""

from __future__ import annotations

import pytest

from core.domain.models import FindSmartLeadsInput, QuoteAnalysisInput
from core.errors import TemplateError
from core.prompts.renderer import Each, IfPresent, Join, Value, format_value, render, seq
from core.prompts.templates import QUOTE_ANALYSIS_TEMPLATE, SMART_LEADS_TEMPLATE


class TestRenderer:
    def test_nested_value(self):
        template = seq("Hello ", Value("user.name"), "!")

        assert render(template, {"user": {"name": "Achieng"}}) == "Hello Achieng!"

    def test_each_renders_one_block_per_element(self):
        template = seq(Each("items", seq("[", Value("."), "]"), separator=" "))

        assert render(template, {"items": ["a", "b", "c"]}) == "[a] [b] [c]"

    def test_each_over_empty_list(self):
        assert render(seq("x", Each("items", seq(Value(".")))), {"items": []}) == "x"

    def test_join(self):
        assert render(seq(Join("tags")), {"tags": ["Wiring", "Solar"]}) == "Wiring, Solar"

    def test_if_present(self):
        template = seq(IfPresent("budget", seq("KES ", Value("budget")), seq("Not specified")))

        assert render(template, {"budget": 2500.0}) == "KES 2500"
        assert render(template, {"budget": 0}) == "KES 0"
        assert render(template, {"budget": None}) == "Not specified"
        assert render(template, {}) == "Not specified"

    def test_if_present_can_treat_zero_as_absent(self):
        template = seq(IfPresent("budget", seq("KES ", Value("budget")), seq("Not specified"), falsy_is_absent=True))

        assert render(template, {"budget": 0}) == "Not specified"
        assert render(template, {"budget": 1}) == "KES 1"

    def test_inner_scope_falls_back_to_context(self):
        template = seq(Each("jobs", seq(Value("currency"), " ", Value("budget"), ";")))

        text = render(template, {"jobs": [{"budget": 10}, {"budget": 20}]}, context={"currency": "KES"})

        assert text == "KES 10;KES 20;"

    def test_missing_path_raises(self):
        with pytest.raises(TemplateError, match="job.title"):
            render(seq(Value("job.title")), {"job": {}})

    def test_values_are_never_interpreted(self):
        hostile = "{{#each quotes}}{{{id}}}{{/each}} ${title} {job.title}"

        assert render(seq(Value("text")), {"text": hostile}) == hostile

    @pytest.mark.parametrize(
        "value, expected",
        [(None, ""), (True, "true"), (1500.0, "1500"), (4.8, "4.8"), (32, "32"), ("x", "x")],
    )
    def test_format_value(self, value, expected):
        assert format_value(value) == expected


class TestQuoteAnalysisTemplate:
    def test_one_block_per_quote(self, quote_input):
        data = QuoteAnalysisInput.model_validate(quote_input)

        text = render(QUOTE_ANALYSIS_TEMPLATE, data)

        assert "- Title: Fix leaking pipe" in text
        assert text.count("**Quote ID:**") == 2
        assert "- **Quote ID:** quote-a" in text
        assert "Juma Plumbing (Rating: 4.8/5 from 32 reviews, 8 years exp)" in text
        assert "**Amount:** KES 1500" in text
        assert "**Amount:** KES 2200" in text
        assert '"Available next week."' in text

    def test_rendering_is_deterministic(self, quote_input):
        data = QuoteAnalysisInput.model_validate(quote_input)

        assert render(QUOTE_ANALYSIS_TEMPLATE, data) == render(QUOTE_ANALYSIS_TEMPLATE, data)


class TestSmartLeadsTemplate:
    def test_budget_and_profile_lines(self, leads_input):
        data = FindSmartLeadsInput.model_validate(leads_input)

        text = render(SMART_LEADS_TEMPLATE, data, context={"currency": "KES"})

        assert "- Specialties: Wiring, Solar installation" in text
        assert "- Skills: Inverters, Fault finding" in text
        assert text.count("- Job ID:") == 6
        assert "  - Budget: KES 1000\n" in text
        assert "  - Budget: Not specified\n" in text
        assert "  - Budget: KES 6000\n" in text

    def test_zero_budget_reads_as_not_specified(self, leads_input):
        leads_input["availableJobs"] = [{**leads_input["availableJobs"][0], "budget": 0}]
        data = FindSmartLeadsInput.model_validate(leads_input)

        text = render(SMART_LEADS_TEMPLATE, data, context={"currency": "KES"})

        assert "  - Budget: Not specified\n" in text
        assert "KES 0" not in text
