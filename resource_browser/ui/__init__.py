"""UI subsystem - table model, key bindings, flash messages and dialogs.

Models (SelectableTable, KeyActions, Flash, Form, Pages) are widget-free;
TableWidget, FlashBar and ModalForm.mount() render them with tkinter.
"""
from resource_browser.ui.Flash import Flash
from resource_browser.ui.Form import Form
from resource_browser.ui.KeyActions import KeyAction, KeyActions
from resource_browser.ui.ModalForm import ModalForm
from resource_browser.ui.Pages import Pages
from resource_browser.ui.SelectableTable import SelectableTable

__all__ = ['Flash', 'Form', 'KeyAction', 'KeyActions', 'ModalForm', 'Pages', 'SelectableTable']
