from .view import FieldView, RecordView, build_view, capitalize_label
from .renderer import ConsolePresenter

__all__ = ["FieldView", "RecordView", "build_view", "capitalize_label", "ConsolePresenter"]
