from gral.ui.export_dialog import ExportDialog, UserAction
from gral.ui.panel import DrawablePanel, InteractivePanel

__all__ = ["DrawablePanel", "ExportDialog", "InteractivePanel", "UserAction"]
