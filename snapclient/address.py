"""Split ``ip/prefix`` strings into the (ip, netmask) pair SnapRoute expects."""

from __future__ import annotations

HOST_MASK = "255.255.255.255"
CLASS_C_MASK = "255.255.255.0"

# Only these two suffixes are recognised; anything else is left in the address.
_SUFFIX_MASKS: tuple[tuple[str, str], ...] = (
    ("/32", HOST_MASK),
    ("/24", CLASS_C_MASK),
)


def split_address_into_ip_and_mask(address: str) -> tuple[str, str]:
    """Split an address into ip and netmask by its literal suffix.

    ``"10.0.0.1/32"`` -> ``("10.0.0.1", "255.255.255.255")``,
    ``"10.0.0.0/24"`` -> ``("10.0.0.0", "255.255.255.0")``. Any other input,
    including other prefix lengths such as ``/16``, is returned unchanged with
    a host mask. The address itself is not validated.
    """
    for suffix, mask in _SUFFIX_MASKS:
        if address.endswith(suffix):
            return address[: -len(suffix)], mask
    return address, HOST_MASK
