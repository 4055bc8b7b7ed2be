"""Preview layer — board-state ownership, gestures and status reports.

Quick start::

    from pieceforge.core import standard_piece
    from pieceforge.preview import PreviewController, Tool

    ctrl = PreviewController()
    ctrl.load_piece(standard_piece("knight"))
    ctrl.events.on_render.append(lambda frame: print(frame.report.summary))
    ctrl.select_tool(Tool.ENEMY)
    ctrl.apply_tool(5, 2)
"""

from pieceforge.preview.controller import PreviewController, PreviewEvents
from pieceforge.preview.interfaces import PreviewFrame, RenderCallback, Tool
from pieceforge.preview.piece_file import load_piece_file, save_piece_file
from pieceforge.preview.report import PreviewReport, build_report

__all__ = [
    "PreviewController",
    "PreviewEvents",
    "PreviewFrame",
    "PreviewReport",
    "RenderCallback",
    "Tool",
    "build_report",
    "load_piece_file",
    "save_piece_file",
]
