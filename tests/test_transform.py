"""End-to-end tests for the style mapping to class list pipeline."""

import pytest

from cotton_unocss.core.settings import TransformSettings
from cotton_unocss.core.transform import (
    AtomicResult,
    TransformOptions,
    prepare_declaration,
    transform_to_atomic,
)

NO_IGNORES = TransformSettings()


def run(style, settings=NO_IGNORES, **options):
    return transform_to_atomic(style, TransformOptions(**options), settings=settings)


class TestPrepareDeclaration:
    def test_fallback_is_sent_to_generator(self):
        seen = []

        def generator(declaration, is_rem):
            seen.append((declaration, is_rem))
            return ["text-[#ffffff]"]

        prepared = prepare_declaration(
            "color", "var(--background-bg2, #ffffff)", generator=generator
        )

        assert seen == [("color: #ffffff", False)]
        assert prepared.uno_value == "#ffffff"
        assert prepared.css_value == "var(--background-bg2, #ffffff)"
        assert prepared.has_px is False
        assert prepared.to_class() == "text-bg_2"

    def test_comments_stripped(self):
        prepared = prepare_declaration("width", "/* fill */ 100px ")
        assert prepared.css_value == "100px"
        assert prepared.has_px is True

    def test_empty_candidates(self):
        prepared = prepare_declaration("color", "red", generator=lambda d, r: [])
        assert prepared.uno_class is None
        assert prepared.to_class() == ""


class TestTransformToAtomic:
    def test_token_injection(self):
        result = run({"color": "var(--background-bg2, #ffffff)"})
        assert result.uno == "text-bg_2"
        assert result.css_code == "color: var(--background-bg2, #ffffff);"

    def test_var_without_fallback(self):
        result = run({"background-color": "var(--text-symbol-text-1)"})
        assert result.uno == "bg-text_1"

    def test_case_variant_from_generator(self):
        result = transform_to_atomic(
            {"color": "var(--background-bg1, #ffffff)"},
            settings=NO_IGNORES,
            generator=lambda d, r: ["text-[#FFFFFF]"],
        )
        assert result.uno == "text-bg_1"

    def test_border_shorthand_with_token(self):
        result = run({"border": "1px solid var(--line-line_light, #EEEEEE)"})
        assert result.uno == "border-1 border-solid border-line_light"

    def test_padding_px(self):
        assert run({"padding": "16px"}).uno == "p-16"
        assert run({"padding": "8px 16px"}).uno == "py-8 px-16"

    def test_unitless_padding_is_scaled(self):
        assert run({"padding": "4"}).uno == "p-16"

    def test_unitless_border_width_is_scaled(self):
        assert run({"border-width": "2"}).uno == "border-8"

    def test_rem(self):
        assert run({"padding": "16px"}, is_rem=True).uno == "p-1rem"

    def test_order_and_prefix(self):
        style = {"width": "100px", "color": "#333", "padding": "8px"}
        assert run(style).uno == "w-100 text-[#333] p-8"
        assert run(style, prefix="uno-").uno == "uno-w-100 uno-text-[#333] uno-p-8"

    def test_prefix_is_per_declaration(self):
        style = {"padding": "8px 16px", "width": "4px"}
        assert run(style, prefix="u-").uno == "u-py-8 px-16 u-w-4"

    def test_ignore_list(self):
        settings = TransformSettings(no_need_styles_key=["font-family"])
        result = run({"font-family": "Inter", "color": "#fff"}, settings=settings)
        assert result.css_code == "color: #fff;"
        assert result.uno == "text-[#fff]"

    def test_default_settings_are_loaded(self, monkeypatch):
        monkeypatch.delenv("COTTON_UNOCSS_SETTINGS", raising=False)
        result = transform_to_atomic({"font-family": "Inter", "color": "white"})
        assert "font-family" not in result.css_code
        assert result.uno == "text-white"

    def test_empty_fragment_still_in_css(self):
        result = transform_to_atomic(
            {"color": "red", "width": "1px"},
            settings=NO_IGNORES,
            generator=lambda d, r: [] if d.startswith("color") else ["w-1px"],
        )
        assert result.css_code == "color: red;\nwidth: 1px;"
        assert result.uno == "w-1"

    def test_css_code_keeps_original_value(self):
        result = run({"padding": "/* gap */ var(--space, 4px) "})
        assert result.css_code == "padding: var(--space, 4px);"
        assert result.uno == "p-4"

    def test_empty_style(self):
        assert run({}) == AtomicResult(css_code="", uno="")

    def test_class_list_alias(self):
        result = run({"display": "flex"})
        assert result.class_list == result.uno == "flex"

    def test_generator_errors_propagate(self):
        def broken(declaration, is_rem):
            raise RuntimeError("boom")

        with pytest.raises(RuntimeError):
            transform_to_atomic({"color": "red"}, settings=NO_IGNORES, generator=broken)
