"""Translations, view state, image helpers and app assembly."""

from __future__ import annotations

import io

import pytest
from PIL import Image

from config.settings import AppConfig
from modules.ui.i18n import TRANSLATIONS, Translator
from modules.ui.samples import LANGUAGE_SAMPLES, get_sample, sample_choices
from modules.ui.state import Tab, UIState
from modules.utils.image_utils import describe_image, generate_thumbnail, load_image


def test_translator_falls_back_to_english():
    tamil = Translator("ta")
    assert tamil("history.title") == "வரலாறு"
    assert tamil("notice.downloadReady") == TRANSLATIONS["en"]["notice.downloadReady"]
    assert Translator("xx").language == "en"
    assert tamil("unknown.key") == "unknown.key"


def test_translator_formats_arguments():
    assert Translator("en")("notice.fileLoaded", name="a.txt") == "File loaded: a.txt"


def test_every_language_covers_only_known_keys():
    english = set(TRANSLATIONS["en"])
    for language, table in TRANSLATIONS.items():
        assert set(table) <= english, language


def test_ui_state_from_config():
    state = UIState.from_config(AppConfig(theme="dark", language="hi"))
    assert state == UIState(active_tab=Tab.TEXT_ENCODE, theme="dark", language="hi")
    assert state.with_tab("text-decode").active_tab is Tab.TEXT_DECODE


def test_samples_lookup():
    assert len(sample_choices()) == len(LANGUAGE_SAMPLES)
    assert get_sample("tamil") == get_sample("Tamil")
    assert get_sample("Klingon") == ""


def test_image_helpers():
    buffer = io.BytesIO()
    Image.new("RGB", (600, 300)).save(buffer, format="GIF")

    image = load_image(buffer.getvalue())
    assert describe_image(image) == "GIF 600×300"
    assert generate_thumbnail(image, (100, 100)).size == (100, 50)
    assert image.size == (600, 300)


def test_load_image_rejects_garbage():
    with pytest.raises(ValueError):
        load_image(b"definitely not an image")


def test_load_image_rejects_decompression_bomb(monkeypatch):
    buffer = io.BytesIO()
    Image.new("RGB", (60, 60)).save(buffer, format="PNG")
    monkeypatch.setattr(Image, "MAX_IMAGE_PIXELS", 100)

    with pytest.raises(ValueError):
        load_image(buffer.getvalue())


@pytest.mark.integration
def test_build_app_assembles_blocks(tmp_path):
    gr = pytest.importorskip("gradio")
    from modules.ui.layout import build_app

    config = AppConfig(history_path=tmp_path / "history.json", output_dir=tmp_path / "downloads")
    app = build_app(config)

    assert isinstance(app, gr.Blocks)
