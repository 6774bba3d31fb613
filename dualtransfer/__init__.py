"""DualTransfer: dual-list partition, selection and move engine."""

from dualtransfer.core.constants import APP_VERSION as __version__
