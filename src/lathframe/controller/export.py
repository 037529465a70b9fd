"""
Blueprint export to PDF, SVG or PNG through the matplotlib port.
"""
from __future__ import annotations

import logging
from pathlib import Path
from typing import Union

from lathframe.controller.design import Design
from lathframe.drawing.mpl_port import MatplotlibPort
from lathframe.model.geometry_primitives import Size

logger = logging.getLogger(__name__)

SUPPORTED_SUFFIXES = (".pdf", ".svg", ".png")


def export_blueprints(design: Design, path: Union[str, Path]) -> Size:
    """
    Render the blueprint sheet of `design` into `path`.

    Raises:
        ValueError: If the file extension is not one of `SUPPORTED_SUFFIXES`.
    """
    path = Path(path)
    if path.suffix.lower() not in SUPPORTED_SUFFIXES:
        raise ValueError(f"Unsupported export format '{path.suffix}', use one of {', '.join(SUPPORTED_SUFFIXES)}.")

    sheet = design.blueprint_sheet()
    size = sheet.measure(MatplotlibPort(1.0, 1.0))
    port = MatplotlibPort(size.width, size.height)
    sheet.render(port)
    port.save_figure(path)
    logger.info(f"Exported blueprint sheet ({size.width:.0f} x {size.height:.0f}) to {path}.")
    return size
