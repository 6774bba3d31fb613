"""User interface package for DualTransfer."""

from dualtransfer.ui.app import create_application
from dualtransfer.ui.engine_signals import EngineSignals
from dualtransfer.ui.transfer_panel import TransferPanel
from dualtransfer.ui.main_window import MainWindow

__all__ = [
    # App
    "create_application",
    # Engine bridge
    "EngineSignals",
    # Widgets
    "TransferPanel",
    "MainWindow",
]
