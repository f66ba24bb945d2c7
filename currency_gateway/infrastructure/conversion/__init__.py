"""
Infrastructure adapters for the conversion bounded context.

Each adapter implements a domain port (ABC) and connects
to an external exchange-rate API.
"""
