from cotton_unocss.core.plugin import PLUGIN, transform_css_code
from cotton_unocss.core.settings import TransformSettings


def test_plugin_descriptor():
    assert PLUGIN.to_dict() == {
        "name": "@cotton/unocss",
        "code": {
            "css": {"title": "UnoCSS", "lang": "text"},
            "js": False,
        },
    }


def test_transform_uses_host_rem_option():
    settings = TransformSettings()
    assert transform_css_code({"padding": "16px"}, {"useRem": True}, settings=settings) == "p-1rem"
    assert transform_css_code({"padding": "16px"}, {"useRem": False}, settings=settings) == "p-16"
    assert transform_css_code({"padding": "16px"}, settings=settings) == "p-16"


def test_code_block_transform():
    block = PLUGIN.code["css"]
    assert block.transform({"color": "var(--text-2, #666666)"}) == "text-text_2"
