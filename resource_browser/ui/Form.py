"""
Form - widget-free description of a dialog form.

A Form collects drop-downs and buttons together with their colours. ModalForm
turns it into tkinter widgets when the dialog is shown, so the code building a
form never touches Tk directly.
"""
from dataclasses import dataclass
from typing import Callable, List, Optional

ALIGN_LEFT = 'left'
ALIGN_CENTER = 'center'
ALIGN_RIGHT = 'right'


@dataclass
class DropDown:
    """
    Option list with a current selection.

    Attributes:
        label: Text shown before the control
        options: Selectable values
        current: Index of the selected option
        on_select: Called with (option, index) on selection
    """
    label: str
    options: List[str]
    current: int = 0
    on_select: Optional[Callable[[str, int], None]] = None

    def select(self, index: int) -> None:
        """Select option `index` and fire on_select. Out-of-range indexes are ignored."""
        if not 0 <= index < len(self.options):
            return
        self.current = index
        if self.on_select is not None:
            self.on_select(self.options[index], index)

    @property
    def value(self) -> str:
        return self.options[self.current]


@dataclass
class FormButton:
    """Button description; colours apply while the button is activated (hover/focus)."""
    label: str
    handler: Callable[[], None]
    background_color_activated: Optional[str] = None
    label_color_activated: Optional[str] = None

    def set_background_color_activated(self, color: str) -> 'FormButton':
        self.background_color_activated = color
        return self

    def set_label_color_activated(self, color: str) -> 'FormButton':
        self.label_color_activated = color
        return self

    def press(self) -> None:
        self.handler()


class Form:
    """
    Ordered form items and buttons.

    Attributes:
        item_padding: Vertical padding between items, in pixels
        buttons_align: ALIGN_LEFT, ALIGN_CENTER or ALIGN_RIGHT
        button_background_color: Button background
        button_text_color: Button label colour
        label_color: Item label colour
        field_text_color: Field text colour
    """

    def __init__(self):
        self.items: List[DropDown] = []
        self.buttons: List[FormButton] = []
        self.item_padding = 1
        self.buttons_align = ALIGN_LEFT
        self.button_background_color: Optional[str] = None
        self.button_text_color: Optional[str] = None
        self.label_color: Optional[str] = None
        self.field_text_color: Optional[str] = None

    def add_drop_down(
        self,
        label: str,
        options: List[str],
        initial: int,
        on_select: Optional[Callable[[str, int], None]] = None
    ) -> 'Form':
        self.items.append(DropDown(label, list(options), initial, on_select))
        return self

    def add_button(self, label: str, handler: Callable[[], None]) -> 'Form':
        self.buttons.append(FormButton(label, handler))
        return self

    def get_button(self, index: int) -> Optional[FormButton]:
        """Returns button `index`, or None when out of range."""
        if 0 <= index < len(self.buttons):
            return self.buttons[index]
        return None

    def get_button_index(self, label: str) -> int:
        """Returns the index of the button labelled `label`, or -1."""
        for i, button in enumerate(self.buttons):
            if button.label == label:
                return i
        return -1

    def button_count(self) -> int:
        return len(self.buttons)
