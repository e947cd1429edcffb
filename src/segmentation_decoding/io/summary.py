"""Persist decoded-frame summaries as JSON."""

from __future__ import annotations

from pathlib import Path

import orjson
from loguru import logger

from segmentation_decoding.schemas.summary import SegmentationSummary


class SegmentationSummaryWriter:
    """Store each summary next to its siblings as ``{tensor stem}.json``.

    The output directory is created lazily on the first write, so a run
    in which every tensor fails leaves nothing behind.
    """

    def __init__(self, output_dir: Path) -> None:
        self.output_dir = output_dir

    def path_for(self, source: str) -> Path:
        return self.output_dir / f"{Path(source).stem}.json"

    def write(self, summary: SegmentationSummary) -> Path:
        out_path = self.path_for(summary.source)
        if out_path.exists():
            logger.warning(f"Overwriting existing summary {out_path}")
        out_path.parent.mkdir(parents=True, exist_ok=True)
        payload = summary.model_dump(mode="json")
        out_path.write_bytes(orjson.dumps(payload, option=orjson.OPT_INDENT_2))
        return out_path
