"""Tests for the built-in UnoCSS class generator."""

import pytest

from cotton_unocss.core.class_generator import (
    BaseClassGenerator,
    UnoClassGenerator,
    arbitrary_value,
    default_generator,
)


def first(declaration, is_rem=False):
    candidates = default_generator(declaration, is_rem)
    return candidates[0] if candidates else None


class TestBoxShorthand:
    def test_single_value(self):
        assert first("padding: 16px") == "p-16px"

    def test_vertical_horizontal(self):
        assert first("padding: 8px 16px") == "py-8px px-16px"

    def test_four_values(self):
        assert first("padding: 1px 2px 3px 4px") == "pt-1px pr-2px pb-3px pl-4px"

    def test_three_values(self):
        assert first("margin: 1px 2px 3px") == "mt-1px mr-2px mb-3px ml-2px"

    def test_unitless(self):
        assert first("padding: 4") == "p-4"

    def test_negative_margin(self):
        assert first("margin-top: -8px") == "-mt-8px"


class TestColors:
    def test_hex_is_bracketed(self):
        assert first("color: #FFFFFF") == "text-[#FFFFFF]"
        assert first("background-color: #333") == "bg-[#333]"

    def test_keyword(self):
        assert first("color: white") == "text-white"

    def test_var_reference(self):
        assert first("background: var(--background-bg1)") == "bg-[var(--background-bg1)]"

    def test_function_spaces_removed(self):
        assert first("color: rgba(0, 0, 0, 0.5)") == "text-[rgba(0,0,0,0.5)]"


class TestBorders:
    def test_shorthand(self):
        assert first("border: 1px solid #EEE") == "border-1px border-solid border-[#EEE]"

    def test_side_shorthand(self):
        assert first("border-bottom: 2px dashed red") == "border-b-2px border-b-dashed border-b-red"

    def test_width_ignores_rem(self):
        assert first("border-width: 2px", is_rem=True) == "border-2px"

    def test_radius(self):
        assert first("border-radius: 4px") == "rounded-4px"


class TestKeywords:
    @pytest.mark.parametrize(
        "declaration,expected",
        [
            ("display: none", "hidden"),
            ("display: flex", "flex"),
            ("position: absolute", "absolute"),
            ("flex-direction: column", "flex-col"),
            ("justify-content: space-between", "justify-between"),
            ("align-items: flex-start", "items-start"),
            ("text-align: center", "text-center"),
            ("font-weight: 600", "font-600"),
            ("z-index: -1", "-z-1"),
            ("overflow: hidden", "overflow-hidden"),
            ("white-space: nowrap", "whitespace-nowrap"),
        ],
    )
    def test_keyword_classes(self, declaration, expected):
        assert first(declaration) == expected


class TestNumbers:
    def test_opacity(self):
        assert first("opacity: 0.5") == "op-50"
        assert first("opacity: 40%") == "op-40"

    def test_flex(self):
        assert first("flex: 1") == "flex-1"
        assert first("flex: 1 1 0%") == "flex-[1_1_0%]"
        assert first("flex-grow: 1") == "grow"
        assert first("flex-shrink: 0") == "shrink-0"

    def test_rem_conversion(self):
        assert first("width: 100px", is_rem=True) == "w-6.25rem"
        assert first("font-size: 14px", is_rem=True) == "text-0.875rem"

    def test_other_units_kept(self):
        assert first("width: 50%", is_rem=True) == "w-50%"


class TestFallbacks:
    def test_unknown_property(self):
        assert first("mix-blend-mode: multiply screen") == "[mix-blend-mode:multiply_screen]"

    def test_candidate_list(self):
        assert default_generator("width: 10px", False) == ["w-10px", "[width:10px]"]

    def test_important(self):
        assert default_generator("color: red !important", False) == ["!text-red", "![color:red]"]

    def test_box_shadow(self):
        assert (
            first("box-shadow: 0 1px 2px rgba(0, 0, 0, 0.1)")
            == "shadow-[0_1px_2px_rgba(0,0,0,0.1)]"
        )

    @pytest.mark.parametrize("declaration", ["color: ", "no colon here", ": red", ""])
    def test_nothing_generated(self, declaration):
        assert default_generator(declaration, False) == []


def test_arbitrary_value():
    assert arbitrary_value(" 0 1px  2px ") == "[0_1px_2px]"


def test_base_generator_is_abstract():
    with pytest.raises(NotImplementedError):
        BaseClassGenerator()("color: red")


def test_custom_root_font_size():
    generator = UnoClassGenerator(root_font_size=10)
    assert generator.generate("height: 25px", True)[0] == "h-2.5rem"
