"""Custom widgets package for DualTransfer."""

from dualtransfer.ui.widgets.transfer_list import TransferListWidget
from dualtransfer.ui.widgets.transfer_controls import TransferControls

__all__ = [
    "TransferListWidget",
    "TransferControls",
]
