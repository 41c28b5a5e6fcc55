#!/usr/bin/env python
import logging
from typing import cast

import jsonargparse

from .app import PixelArtApp
from .config import PixelArtConfig
from .display import InitError, PixDisplay

logger = logging.getLogger()


def main(args: list[str] | None = None) -> int:
    jsonargparse.set_parsing_settings(docstring_parse_attribute_docstrings=True)

    config = cast(
        "PixelArtConfig",
        jsonargparse.auto_cli(PixelArtConfig, args=args, parser_mode="toml"),  # pyright: ignore[reportUnknownMemberType]
    )
    logger.setLevel(config.log_level)

    # Window size must be a whole number of cells
    _ = config.grid_size()

    try:
        with PixDisplay(config) as display:
            app = PixelArtApp(config, display)
            app.run()
    except InitError as e:
        print(e)
        logger.error(str(e))
        return 1
    return 0


if __name__ == "__main__":
    raise SystemExit(main())
