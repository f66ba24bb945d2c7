"""HTTP interface for the conversion bounded context."""
