"""Use cases for the conversion bounded context."""
