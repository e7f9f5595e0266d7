from .main_window import MainWindow
from .results_widget import ResultsWidget

__all__ = ["MainWindow", "ResultsWidget"]
