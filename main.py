from __future__ import annotations

import logging

from api import Viewport, layout, load_layout_config
from common import settings
from common.logging import setup_default_logging

CANVAS_SIZE = (800, 600)

logger = logging.getLogger("main")


def main() -> None:
    """YAML の設定でレイアウトを計算し、レイヤーごとの多角形数をログに出す。"""
    setup_default_logging(settings.get().LOG_LEVEL)
    cfg = load_layout_config(clamp=True)
    result = layout(cfg, Viewport.of_size(*CANVAS_SIZE))
    for plan in result.layers:
        logger.info(
            "layer %d: %d/%d polygons%s",
            plan.index,
            len(plan.polygons),
            plan.candidates,
            " + structure outline" if plan.structure is not None else "",
        )
    if result.terminated_early:
        logger.info("skipped layers: %s", list(result.skipped_layers))


if __name__ == "__main__":
    main()
