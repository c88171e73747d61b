"""Callback implementations for the Gradio interface."""

from __future__ import annotations

import html
import logging
from datetime import datetime
from pathlib import Path
from typing import Any, Optional

from PIL import Image

from config.settings import AppConfig
from modules.codec.base64_codec import (
    decode_bytes,
    decode_text,
    encode_bytes,
    encode_text,
    format_file_size,
    is_base64,
    strip_data_url,
    to_data_url,
)
from modules.codec.file_sniffer import FilePreview, PreviewKind, build_preview, sniff_mime_type
from modules.codec.snippets import get_code_snippet
from modules.services.history_service import (
    HistoryItem,
    HistoryService,
    HistoryType,
    InMemoryHistoryRepository,
)
from modules.services.storage_service import StorageService
from modules.ui.i18n import Translator
from modules.ui.samples import get_sample
from modules.ui.state import Tab, UIState
from modules.utils.image_utils import describe_image, generate_thumbnail, load_image

logger = logging.getLogger(__name__)

HistoryRows = list[list[str]]


def render_preview_html(preview: Optional[FilePreview], t: Translator) -> str:
    """Render decoded content the way the preview panel shows it."""
    if preview is None or preview.kind is PreviewKind.NONE:
        return f"<p><em>{html.escape(t('preview.none'))}</em></p>"
    caption = f"<small>{html.escape(preview.mime_type)} · {format_file_size(preview.size)}</small>"
    if preview.kind is PreviewKind.IMAGE:
        return (
            f'<img src="{preview.data_url}" alt="Decoded image" '
            f'style="max-width:100%;max-height:24rem;object-fit:contain"/><br/>{caption}'
        )
    if preview.kind is PreviewKind.PDF:
        return (
            f'<object data="{preview.data_url}" type="application/pdf" '
            f'style="width:100%;height:24rem"></object><br/>{caption}'
        )
    return (
        '<pre style="white-space:pre-wrap;max-height:24rem;overflow:auto">'
        f"{html.escape(preview.text or '')}</pre>{caption}"
    )


def _shorten(value: str, length: int = 40) -> str:
    return value[:length] + "..." if len(value) > length else value


def build_callbacks(
    config: AppConfig,
    history: Optional[HistoryService] = None,
    storage: Optional[StorageService] = None,
) -> dict[str, Any]:
    """Return a dictionary of Gradio callback functions."""

    history_service = history or HistoryService(
        InMemoryHistoryRepository(),
        max_items=config.max_history_items,
        max_field_length=config.max_field_length,
    )
    storage_service = storage or StorageService(config.output_dir, max_items=config.max_output_files)

    def _t(state: Optional[UIState]) -> Translator:
        return Translator(state.language if state is not None else config.language)

    def _record(input_text: str, output_text: str, item_type: HistoryType) -> Optional[HistoryItem]:
        try:
            return history_service.add(input_text, output_text, item_type)
        except Exception:  # noqa: BLE001
            logger.exception("Error adding to history")
            return None

    def _status(message: str) -> str:
        warning = history_service.consume_warning()
        if warning:
            return f"{message}\n\n⚠️ {warning}"
        return message

    def _read_upload(path: str, t: Translator) -> tuple[Optional[bytes], str]:
        """Read an uploaded file, enforcing the upload size cap."""
        file_path = Path(path)
        try:
            size = file_path.stat().st_size
            if size > config.max_upload_bytes:
                return None, t(
                    "notice.tooLarge",
                    size=format_file_size(size),
                    limit=format_file_size(config.max_upload_bytes),
                )
            return file_path.read_bytes(), ""
        except OSError as exc:
            logger.error("Error reading %s: %s", file_path, exc)
            return None, t("notice.fileError")

    def _history_output(encoded: str, size: int, label: str) -> str:
        if size < config.history_inline_limit:
            return encoded
        return f"[{label} - {format_file_size(size)}]"

    # Live conversion while typing; not recorded in history
    def on_live_encode(text: str) -> tuple[str, None]:
        return (encode_text(text) if text else ""), None

    def on_live_decode(text: str, current_output: str) -> str:
        candidate = (text or "").strip()
        if not candidate:
            return ""
        if not is_base64(candidate):
            return current_output
        return decode_text(candidate)

    # Text encode ----------------------------------------------------------
    def on_encode_text(
        state: UIState,
        text: str,
        file_name: Optional[str],
        current_output: str,
    ) -> tuple[str, str]:
        t = _t(state)
        if not text:
            return "", t("notice.emptyInput")
        if file_name:
            # content came from an upload and is already encoded
            return current_output, t("notice.fileLoaded", name=file_name)
        encoded = encode_text(text)
        if not encoded:
            return "", t("notice.encodeError")
        _record(text, encoded, HistoryType.ENCODE)
        return encoded, _status(t("notice.encoded"))

    def on_encode_file(
        state: UIState,
        file_path: Optional[str],
        current_text: str,
        current_output: str,
        current_name: Optional[str],
    ) -> tuple[str, str, Optional[str], str]:
        t = _t(state)
        if not file_path:
            return current_text, current_output, current_name, t("common.ready")
        name = Path(file_path).name
        data, error = _read_upload(file_path, t)
        if data is None:
            return current_text, current_output, current_name, error

        encoded = encode_bytes(data)
        if len(data) < config.history_file_limit:
            _record(
                f"File: {name} ({format_file_size(len(data))})",
                _history_output(encoded, len(data), "Base64 Content"),
                HistoryType.ENCODE,
            )
        return f"[File: {name}]", encoded, name, _status(t("notice.fileLoaded", name=name))

    def on_download_encoded(
        state: UIState, encoded: str, file_name: Optional[str]
    ) -> tuple[Optional[str], str]:
        t = _t(state)
        if not encoded:
            return None, t("notice.nothingToDownload")
        try:
            path = storage_service.save_encoded_text(encoded, file_name)
        except OSError as exc:
            logger.error("Failed to save encoded text: %s", exc)
            return None, t("notice.downloadFailed")
        return str(path), t("notice.downloadReady")

    # Text decode ----------------------------------------------------------
    def on_decode_text(state: UIState, text: str) -> tuple[str, str, str]:
        t = _t(state)
        candidate = (text or "").strip()
        if not candidate:
            return "", render_preview_html(None, t), t("notice.emptyInput")
        if not is_base64(candidate):
            return "", render_preview_html(None, t), t("notice.invalidBase64")

        try:
            preview = build_preview(decode_bytes(candidate))
        except ValueError as exc:
            logger.error("Decoding error: %s", exc)
            return "", render_preview_html(None, t), t("notice.invalidBase64")
        decoded = decode_text(candidate)
        _record(candidate, decoded, HistoryType.DECODE)
        return decoded, render_preview_html(preview, t), _status(t("notice.decoded"))

    def on_decode_file(
        state: UIState,
        file_path: Optional[str],
        current_text: str,
        current_output: str,
        current_preview: str,
        current_name: Optional[str],
    ) -> tuple[str, str, str, Optional[str], str]:
        t = _t(state)
        unchanged = (current_text, current_output, current_preview, current_name)
        if not file_path:
            return (*unchanged, t("common.ready"))
        name = Path(file_path).name
        data, error = _read_upload(file_path, t)
        if data is None:
            return (*unchanged, error)

        content = data.decode("utf-8", errors="replace").strip()
        _, payload = strip_data_url(content)
        payload = "".join(payload.split())
        if not is_base64(payload):
            return (*unchanged, t("notice.noBase64InFile"))
        decoded, preview_html, status = on_decode_text(state, payload)
        return payload, decoded, preview_html, name, status

    def on_download_decoded(
        state: UIState, text: str, file_name: Optional[str]
    ) -> tuple[Optional[str], str]:
        t = _t(state)
        _, payload = strip_data_url(text or "")
        payload = "".join(payload.split())
        if not is_base64(payload):
            return None, t("notice.nothingToDownload")
        try:
            data = decode_bytes(payload)
            stem = Path(file_name).stem if file_name else None
            path = storage_service.save_decoded_bytes(data, stem)
        except (ValueError, OSError) as exc:
            logger.error("Error downloading file: %s", exc)
            return None, t("notice.downloadFailed")
        return str(path), t("notice.downloadReady")

    # Image encode ---------------------------------------------------------
    def on_encode_image(
        state: UIState,
        image_path: Optional[str],
        current_output: str,
        current_data_url: str,
        current_name: Optional[str],
        current_preview: Optional[Any] = None,
    ) -> tuple[str, str, Optional[str], Optional[Any], str]:
        t = _t(state)
        if not image_path:
            return "", "", None, None, t("common.ready")
        name = Path(image_path).name
        unchanged = (current_output, current_data_url, current_name, current_preview)
        data, error = _read_upload(image_path, t)
        if data is None:
            return (*unchanged, error)

        mime_type = sniff_mime_type(data)
        try:
            image = load_image(data)
        except ValueError:
            # svg is encoded without a raster preview
            if mime_type != "image/svg+xml":
                return (*unchanged, t("notice.notImage"))
            image = None
        if image is not None:
            mime_type = Image.MIME.get(image.format or "", mime_type)
            info = describe_image(image)
            preview = generate_thumbnail(image, (512, 512))
        else:
            info, preview = mime_type, None

        encoded = encode_bytes(data)
        if len(data) < config.history_file_limit:
            _record(
                f"Image: {name} ({format_file_size(len(data))})",
                _history_output(encoded, len(data), "Base64 Image"),
                HistoryType.ENCODE,
            )
        status = f"{t('notice.imageLoaded', name=name)} · {info} · {format_file_size(len(data))}"
        return encoded, to_data_url(data, mime_type), name, preview, _status(status)

    # Image decode ---------------------------------------------------------
    def on_decode_image(
        state: UIState, text: str, source_name: Optional[str] = None
    ) -> tuple[Optional[Any], str]:
        t = _t(state)
        _, payload = strip_data_url(text or "")
        payload = "".join(payload.split())
        if not payload:
            return None, t("imageDecoder.enterValidData")
        if not is_base64(payload):
            return None, t("notice.invalidBase64")
        try:
            image = load_image(decode_bytes(payload))
        except ValueError as exc:
            logger.info("Base64 payload is not an image: %s", exc)
            return None, t("imageDecoder.noValidImage")

        info = describe_image(image)
        input_label = f"Text file: {source_name}" if source_name else payload
        _record(input_label, "[Decoded Image]", HistoryType.DECODE)
        return generate_thumbnail(image, (1024, 1024)), _status(info)

    def on_image_text_file(
        state: UIState,
        file_path: Optional[str],
        current_text: str,
        current_image: Optional[Any],
        current_name: Optional[str],
    ) -> tuple[str, Optional[Any], Optional[str], str]:
        t = _t(state)
        if not file_path:
            return current_text, current_image, current_name, t("common.ready")
        name = Path(file_path).name
        data, error = _read_upload(file_path, t)
        if data is None:
            return current_text, current_image, current_name, error

        content = data.decode("utf-8", errors="replace").strip()
        _, payload = strip_data_url(content)
        if not is_base64("".join(payload.split())):
            return content, current_image, name, t("notice.noBase64InFile")
        image, status = on_decode_image(state, content, name)
        return content, image, name, f"{t('notice.textFileLoaded', name=name)} · {status}"

    # Snippets and samples -------------------------------------------------
    def on_snippet(kind: str, language: str, value: str) -> str:
        if not value:
            return ""
        return get_code_snippet(kind, language, value)

    def on_select_sample(sample_name: str) -> tuple[str, None]:
        return get_sample(sample_name), None

    # History --------------------------------------------------------------
    def _history_rows(items: list[HistoryItem], t: Translator) -> tuple[HistoryRows, list[str]]:
        rows = [
            [
                datetime.fromtimestamp(item.timestamp / 1000).strftime("%Y-%m-%d %H:%M:%S"),
                t("history.encoded" if item.type is HistoryType.ENCODE else "history.decoded"),
                _shorten(item.input),
                _shorten(item.output),
            ]
            for item in items
        ]
        return rows, [item.id for item in items]

    def on_history_search(state: UIState, query: str) -> tuple[HistoryRows, list[str], str]:
        t = _t(state)
        items = history_service.search(query)
        rows, ids = _history_rows(items, t)
        if not history_service.items():
            message = t("history.noHistory")
        elif not items:
            message = t("history.noResults")
        else:
            message = f"{len(items)} / {len(history_service.items())}"
        return rows, ids, message

    def on_history_delete(
        state: UIState, selected_id: Optional[str], query: str
    ) -> tuple[HistoryRows, list[str], Optional[str], str]:
        t = _t(state)
        if not selected_id:
            rows, ids, _ = on_history_search(state, query)
            return rows, ids, None, t("history.selectFirst")
        history_service.delete(selected_id)
        rows, ids, _ = on_history_search(state, query)
        return rows, ids, None, _status(t("history.deleted"))

    def on_history_clear(state: UIState) -> tuple[HistoryRows, list[str], Optional[str], str]:
        t = _t(state)
        history_service.clear()
        return [], [], None, _status(t("history.cleared"))

    def on_history_restore(
        state: UIState,
        selected_id: Optional[str],
        encode_input: str,
        encode_output: str,
        decode_input: str,
        decode_output: str,
        encode_file_name: Optional[str] = None,
    ) -> tuple[str, str, str, str, Optional[str], str]:
        t = _t(state)
        item = history_service.get(selected_id) if selected_id else None
        if item is None:
            return (
                encode_input,
                encode_output,
                decode_input,
                decode_output,
                encode_file_name,
                t("history.selectFirst"),
            )
        # a restored encode entry is plain text, not the last upload
        if item.type is HistoryType.ENCODE:
            return item.input, item.output, decode_input, decode_output, None, t("history.restored")
        return encode_input, encode_output, item.input, item.output, encode_file_name, t("history.restored")

    # View state -----------------------------------------------------------
    def on_select_tab(state: UIState, tab: Tab | str) -> UIState:
        return state.with_tab(tab)

    def on_toggle_theme(state: UIState) -> tuple[UIState, str]:
        new_state = state.toggled_theme()
        return new_state, _t(new_state)("notice.themeSwitched", theme=new_state.theme)

    def on_change_language(state: UIState, language: str) -> tuple[UIState, str]:
        new_state = state.with_language(language)
        return new_state, _t(new_state)("common.ready")

    return {
        "on_live_encode": on_live_encode,
        "on_live_decode": on_live_decode,
        "on_encode_text": on_encode_text,
        "on_encode_file": on_encode_file,
        "on_download_encoded": on_download_encoded,
        "on_decode_text": on_decode_text,
        "on_decode_file": on_decode_file,
        "on_download_decoded": on_download_decoded,
        "on_encode_image": on_encode_image,
        "on_decode_image": on_decode_image,
        "on_image_text_file": on_image_text_file,
        "on_snippet": on_snippet,
        "on_select_sample": on_select_sample,
        "on_history_search": on_history_search,
        "on_history_delete": on_history_delete,
        "on_history_clear": on_history_clear,
        "on_history_restore": on_history_restore,
        "on_select_tab": on_select_tab,
        "on_toggle_theme": on_toggle_theme,
        "on_change_language": on_change_language,
    }
