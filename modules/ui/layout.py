"""Gradio layout composition for the Base64 converter."""

from __future__ import annotations

from typing import Any, Callable

try:
    import gradio as gr
except ImportError:  # pragma: no cover
    gr = None  # type: ignore

from config.settings import SUPPORTED_LANGUAGES, AppConfig
from modules.codec.snippets import SNIPPET_LANGUAGES
from modules.services.history_service import HistoryService, JsonFileHistoryRepository
from modules.services.storage_service import StorageService
from modules.ui.callbacks import build_callbacks
from modules.ui.i18n import LANGUAGE_NAMES, Translator
from modules.ui.samples import sample_choices
from modules.ui.state import Tab, UIState

_TOGGLE_DARK_JS = "() => { document.body.classList.toggle('dark'); }"
_FORCE_DARK_JS = "() => { document.body.classList.add('dark'); }"


def _build_history_service(config: AppConfig) -> HistoryService:
    repository = JsonFileHistoryRepository(config.history_path, max_bytes=config.history_quota_bytes)
    return HistoryService(
        repository,
        max_items=config.max_history_items,
        max_field_length=config.max_field_length,
    )


def _tab_selector(select: Callable[[UIState, Tab], UIState], tab: Tab) -> Callable[[UIState], UIState]:
    def _select(state: UIState) -> UIState:
        return select(state, tab)

    return _select


def build_app(config: AppConfig) -> Any:
    """Compose and return the Gradio application."""
    if gr is None:
        raise RuntimeError("Gradio is not installed; install the project dependencies first.")

    history = _build_history_service(config)
    storage = StorageService(config.output_dir, max_items=config.max_output_files)
    callbacks_map = build_callbacks(config, history=history, storage=storage)

    initial_state = UIState.from_config(config)
    t = Translator(initial_state.language)
    language_choices = [(LANGUAGE_NAMES[code], code) for code in SUPPORTED_LANGUAGES]

    with gr.Blocks(title=t("app.name")) as demo:
        ui_state = gr.State(initial_state)
        encode_file_name = gr.State(None)
        decode_file_name = gr.State(None)
        image_file_name = gr.State(None)
        image_text_name = gr.State(None)
        history_ids = gr.State([])
        selected_history_id = gr.State(None)

        with gr.Row():
            header = gr.Markdown(f"## {t('app.name')}\n{t('app.tagline')}")
            language_select = gr.Dropdown(
                label=t("header.language"),
                choices=language_choices,
                value=initial_state.language,
                scale=0,
            )
            theme_btn = gr.Button(t("header.theme"), scale=0)

        with gr.Tabs():
            # Text encode
            with gr.Tab(t("tabs.textEncode"), id=Tab.TEXT_ENCODE.value) as tab_encode:
                with gr.Row():
                    with gr.Column():
                        encode_input = gr.Textbox(
                            label=t("textEncoder.input"),
                            lines=8,
                            placeholder=t("textEncoder.placeholder"),
                        )
                        with gr.Row():
                            sample_select = gr.Dropdown(
                                label=t("common.samples"),
                                choices=sample_choices(),
                                value=None,
                            )
                            encode_file = gr.File(label=t("common.upload"), type="filepath")
                        encode_btn = gr.Button(t("textEncoder.encodeButton"), variant="primary")
                    with gr.Column():
                        encode_output = gr.Textbox(
                            label=t("textEncoder.output"),
                            lines=8,
                            interactive=False,
                            show_copy_button=True,
                        )
                        encode_download_btn = gr.Button(t("common.download"))
                        encode_download = gr.File(label=t("common.download"), interactive=False)
                        encode_status = gr.Markdown(t("common.ready"))
                with gr.Accordion(t("snippet.title"), open=False):
                    encode_snippet_lang = gr.Dropdown(
                        label=t("snippet.language"),
                        choices=list(SNIPPET_LANGUAGES),
                        value=SNIPPET_LANGUAGES[0],
                    )
                    encode_snippet = gr.Textbox(lines=12, interactive=False, show_copy_button=True, show_label=False)

            # Text decode
            with gr.Tab(t("tabs.textDecode"), id=Tab.TEXT_DECODE.value) as tab_decode:
                with gr.Row():
                    with gr.Column():
                        decode_input = gr.Textbox(
                            label=t("textDecoder.input"),
                            lines=8,
                            placeholder=t("textDecoder.placeholder"),
                        )
                        decode_file = gr.File(label=t("common.upload"), type="filepath")
                        decode_btn = gr.Button(t("textDecoder.decodeButton"), variant="primary")
                    with gr.Column():
                        decode_output = gr.Textbox(
                            label=t("textDecoder.output"),
                            lines=8,
                            interactive=False,
                            show_copy_button=True,
                        )
                        decode_download_btn = gr.Button(t("common.download"))
                        decode_download = gr.File(label=t("common.download"), interactive=False)
                        decode_status = gr.Markdown(t("common.ready"))
                with gr.Accordion(t("preview.title"), open=True):
                    decode_preview = gr.HTML()
                with gr.Accordion(t("snippet.title"), open=False):
                    decode_snippet_lang = gr.Dropdown(
                        label=t("snippet.language"),
                        choices=list(SNIPPET_LANGUAGES),
                        value=SNIPPET_LANGUAGES[0],
                    )
                    decode_snippet = gr.Textbox(lines=12, interactive=False, show_copy_button=True, show_label=False)

            # Image encode
            with gr.Tab(t("tabs.imageEncode"), id=Tab.IMAGE_ENCODE.value) as tab_image_encode:
                with gr.Row():
                    with gr.Column():
                        # gr.File keeps the uploaded bytes; gr.Image would re-encode them
                        image_input = gr.File(
                            label=t("imageEncoder.input"),
                            type="filepath",
                            file_types=["image"],
                        )
                        image_preview = gr.Image(label=t("preview.title"), type="pil", interactive=False)
                    with gr.Column():
                        image_output = gr.Textbox(
                            label=t("imageEncoder.output"),
                            lines=8,
                            interactive=False,
                            show_copy_button=True,
                        )
                        image_data_url = gr.Textbox(
                            label="Data URL",
                            lines=3,
                            interactive=False,
                            show_copy_button=True,
                        )
                        image_download_btn = gr.Button(t("common.download"))
                        image_download = gr.File(label=t("common.download"), interactive=False)
                        image_status = gr.Markdown(t("common.ready"))

            # Image decode
            with gr.Tab(t("tabs.imageDecode"), id=Tab.IMAGE_DECODE.value) as tab_image_decode:
                with gr.Row():
                    with gr.Column():
                        image_decode_input = gr.Textbox(
                            label=t("imageDecoder.input"),
                            lines=8,
                            placeholder=t("imageDecoder.placeholder"),
                        )
                        image_text_file = gr.File(
                            label=t("imageDecoder.uploadText"),
                            type="filepath",
                            file_types=[".txt"],
                        )
                        image_decode_btn = gr.Button(t("textDecoder.decodeButton"), variant="primary")
                    with gr.Column():
                        image_decode_output = gr.Image(
                            label=t("imageDecoder.output"),
                            type="pil",
                            interactive=False,
                        )
                        image_decode_download_btn = gr.Button(t("common.download"))
                        image_decode_download = gr.File(label=t("common.download"), interactive=False)
                        image_decode_status = gr.Markdown(t("imageDecoder.enterValidData"))

        # History panel
        with gr.Accordion(t("history.title"), open=False):
            with gr.Row():
                history_search = gr.Textbox(label=t("history.search"), scale=3)
                history_restore_btn = gr.Button(t("history.restore"), scale=1)
                history_delete_btn = gr.Button(t("history.delete"), scale=1)
                history_clear_btn = gr.Button(t("history.clearAll"), variant="stop", scale=1)
            history_table = gr.Dataframe(
                headers=[t("history.time"), t("history.title"), t("history.input"), t("history.output")],
                datatype=["str", "str", "str", "str"],
                interactive=False,
                wrap=True,
            )
            history_status = gr.Markdown()

        history_outputs = [history_table, history_ids, history_status]
        refresh_history = (callbacks_map["on_history_search"], [ui_state, history_search], history_outputs)

        # Header events
        language_select.change(
            fn=callbacks_map["on_change_language"],
            inputs=[ui_state, language_select],
            outputs=[ui_state, encode_status],
        ).then(
            fn=_relabel,
            inputs=[ui_state],
            outputs=[
                header,
                encode_input,
                encode_output,
                encode_btn,
                decode_input,
                decode_output,
                decode_btn,
                image_output,
                image_decode_input,
                image_decode_btn,
                history_search,
            ],
        ).then(*refresh_history)

        theme_btn.click(
            fn=callbacks_map["on_toggle_theme"],
            inputs=[ui_state],
            outputs=[ui_state, encode_status],
        ).then(fn=None, js=_TOGGLE_DARK_JS)

        for tab_component, tab in (
            (tab_encode, Tab.TEXT_ENCODE),
            (tab_decode, Tab.TEXT_DECODE),
            (tab_image_encode, Tab.IMAGE_ENCODE),
            (tab_image_decode, Tab.IMAGE_DECODE),
        ):
            tab_component.select(
                fn=_tab_selector(callbacks_map["on_select_tab"], tab),
                inputs=[ui_state],
                outputs=[ui_state],
            )

        # Text encode events
        encode_input.input(
            fn=callbacks_map["on_live_encode"],
            inputs=[encode_input],
            outputs=[encode_output, encode_file_name],
        )
        sample_select.select(
            fn=callbacks_map["on_select_sample"],
            inputs=[sample_select],
            outputs=[encode_input, encode_file_name],
        ).then(
            fn=callbacks_map["on_live_encode"],
            inputs=[encode_input],
            outputs=[encode_output, encode_file_name],
        )
        encode_btn.click(
            fn=callbacks_map["on_encode_text"],
            inputs=[ui_state, encode_input, encode_file_name, encode_output],
            outputs=[encode_output, encode_status],
        ).then(*refresh_history)
        encode_file.upload(
            fn=callbacks_map["on_encode_file"],
            inputs=[ui_state, encode_file, encode_input, encode_output, encode_file_name],
            outputs=[encode_input, encode_output, encode_file_name, encode_status],
        ).then(*refresh_history)
        encode_download_btn.click(
            fn=callbacks_map["on_download_encoded"],
            inputs=[ui_state, encode_output, encode_file_name],
            outputs=[encode_download, encode_status],
        )
        for trigger in (encode_output.change, encode_snippet_lang.change):
            trigger(
                fn=lambda language, value: callbacks_map["on_snippet"]("encode", language, value),
                inputs=[encode_snippet_lang, encode_input],
                outputs=[encode_snippet],
            )

        # Text decode events
        decode_input.input(
            fn=callbacks_map["on_live_decode"],
            inputs=[decode_input, decode_output],
            outputs=[decode_output],
        )
        decode_btn.click(
            fn=callbacks_map["on_decode_text"],
            inputs=[ui_state, decode_input],
            outputs=[decode_output, decode_preview, decode_status],
        ).then(*refresh_history)
        decode_file.upload(
            fn=callbacks_map["on_decode_file"],
            inputs=[ui_state, decode_file, decode_input, decode_output, decode_preview, decode_file_name],
            outputs=[decode_input, decode_output, decode_preview, decode_file_name, decode_status],
        ).then(*refresh_history)
        decode_download_btn.click(
            fn=callbacks_map["on_download_decoded"],
            inputs=[ui_state, decode_input, decode_file_name],
            outputs=[decode_download, decode_status],
        )
        for trigger in (decode_output.change, decode_snippet_lang.change):
            trigger(
                fn=lambda language, value: callbacks_map["on_snippet"]("decode", language, value),
                inputs=[decode_snippet_lang, decode_input],
                outputs=[decode_snippet],
            )

        # Image encode events
        image_input.change(
            fn=callbacks_map["on_encode_image"],
            inputs=[ui_state, image_input, image_output, image_data_url, image_file_name, image_preview],
            outputs=[image_output, image_data_url, image_file_name, image_preview, image_status],
        ).then(*refresh_history)
        image_download_btn.click(
            fn=callbacks_map["on_download_encoded"],
            inputs=[ui_state, image_output, image_file_name],
            outputs=[image_download, image_status],
        )

        # Image decode events
        image_decode_btn.click(
            fn=callbacks_map["on_decode_image"],
            inputs=[ui_state, image_decode_input, image_text_name],
            outputs=[image_decode_output, image_decode_status],
        ).then(*refresh_history)
        image_text_file.upload(
            fn=callbacks_map["on_image_text_file"],
            inputs=[ui_state, image_text_file, image_decode_input, image_decode_output, image_text_name],
            outputs=[image_decode_input, image_decode_output, image_text_name, image_decode_status],
        ).then(*refresh_history)
        image_decode_input.input(fn=lambda: None, outputs=[image_text_name])
        image_decode_download_btn.click(
            fn=callbacks_map["on_download_decoded"],
            inputs=[ui_state, image_decode_input, image_text_name],
            outputs=[image_decode_download, image_decode_status],
        )

        # History events
        history_search.change(*refresh_history)

        def _select_history(ids: list[str], evt: gr.SelectData) -> Any:
            row = evt.index[0] if isinstance(evt.index, (list, tuple)) else evt.index
            if isinstance(row, int) and 0 <= row < len(ids):
                return ids[row]
            return None

        history_table.select(fn=_select_history, inputs=[history_ids], outputs=[selected_history_id])
        history_restore_btn.click(
            fn=callbacks_map["on_history_restore"],
            inputs=[
                ui_state,
                selected_history_id,
                encode_input,
                encode_output,
                decode_input,
                decode_output,
                encode_file_name,
            ],
            outputs=[encode_input, encode_output, decode_input, decode_output, encode_file_name, history_status],
        )
        history_delete_btn.click(
            fn=callbacks_map["on_history_delete"],
            inputs=[ui_state, selected_history_id, history_search],
            outputs=[history_table, history_ids, selected_history_id, history_status],
        )
        history_clear_btn.click(
            fn=callbacks_map["on_history_clear"],
            inputs=[ui_state],
            outputs=[history_table, history_ids, selected_history_id, history_status],
        )

        demo.load(*refresh_history)
        if initial_state.theme == "dark":
            demo.load(fn=None, js=_FORCE_DARK_JS)

    return demo


def _relabel(state: UIState) -> list[Any]:
    """Component updates for a language switch, in the order wired above."""
    t = Translator(state.language)
    return [
        gr.update(value=f"## {t('app.name')}\n{t('app.tagline')}"),
        gr.update(label=t("textEncoder.input"), placeholder=t("textEncoder.placeholder")),
        gr.update(label=t("textEncoder.output")),
        gr.update(value=t("textEncoder.encodeButton")),
        gr.update(label=t("textDecoder.input"), placeholder=t("textDecoder.placeholder")),
        gr.update(label=t("textDecoder.output")),
        gr.update(value=t("textDecoder.decodeButton")),
        gr.update(label=t("imageEncoder.output")),
        gr.update(label=t("imageDecoder.input"), placeholder=t("imageDecoder.placeholder")),
        gr.update(value=t("textDecoder.decodeButton")),
        gr.update(label=t("history.search")),
    ]
