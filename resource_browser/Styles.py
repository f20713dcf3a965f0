"""Styles - colour settings from the "styles" config section."""
from dataclasses import dataclass, fields
from typing import Any, Dict


@dataclass(frozen=True)
class DialogStyles:
    """Colours of modal dialogs. Values are Tk colour names or #rrggbb."""
    bg_color: str
    fg_color: str
    button_bg_color: str
    button_fg_color: str
    button_focus_bg_color: str
    button_focus_fg_color: str
    label_fg_color: str
    field_fg_color: str


class Styles:
    """
    Accessor for the styles section of the configuration.

    Args:
        config: Full application configuration (defaults already merged)
    """

    def __init__(self, config: Dict[str, Any]):
        self._dialog = self._dialog_from(config['styles']['dialog'])

    def dialog(self) -> DialogStyles:
        return self._dialog

    @staticmethod
    def _dialog_from(section: Dict[str, Any]) -> DialogStyles:
        names = {f.name for f in fields(DialogStyles)}
        return DialogStyles(**{k: v for k, v in section.items() if k in names})
