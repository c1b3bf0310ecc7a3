"""Точка входа: разбор командной строки, журнал, реестр демо, окно."""
from __future__ import annotations

import logging
import sys
from typing import Optional, Sequence

from funimage.config import AppConfig, parse_args
from funimage.demos import build_registry

logger = logging.getLogger(__name__)


def configure_logging(level: str) -> None:
    logging.basicConfig(
        level=getattr(logging, level.upper(), logging.INFO),
        format="%(asctime)s %(levelname)-7s %(name)s: %(message)s",
    )


def main(argv: Optional[Sequence[str]] = None) -> int:
    """Создаёт реестр демо и запускает главное окно с выбранным демо."""
    config: AppConfig = parse_args(argv)
    configure_logging(config.log_level)
    registry = build_registry(config.width, config.height, bitmap_path=config.bitmap_path)

    if config.list_demos:
        for demo in registry:
            print(f"{demo.name:16} {demo.kind:10} {demo.description}")
        return 0

    if config.demo not in registry:
        print(f"funimage: неизвестное демо {config.demo!r}; доступны: {', '.join(registry.names())}",
              file=sys.stderr)
        return 2

    # GUI imports stay here so --list works without a display
    from funimage.app import FunImageApp

    logger.info("Starting demo %s at %dx%d", config.demo, config.width, config.height)
    app = FunImageApp(registry, config)
    app.show_demo(config.demo)
    app.mainloop()
    return 0


if __name__ == "__main__":
    sys.exit(main())
