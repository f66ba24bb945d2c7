"""
Conversion bounded context — domain layer.

Amounts, the converter port, and the fixed set of conversion
error kinds reported by the upstream exchange service.
"""
