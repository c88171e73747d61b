"""Application entry point for the Endecoder project."""

from __future__ import annotations

from typing import Optional

from config.settings import load_config
from modules.ui.layout import build_app
from modules.utils.logging import setup_logging


def main(config_path: Optional[str] = None) -> None:
    """Load configuration and launch the Gradio interface."""
    config = load_config(config_path)
    logger = setup_logging(config)
    logger.info("History file: %s", config.history_path)
    app = build_app(config)
    app.queue()
    app.launch(
        share=False,
        inbrowser=False,
        server_name=config.metadata.get("server_name"),
        server_port=config.server_port,
    )


if __name__ == "__main__":
    main()
