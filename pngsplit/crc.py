"""CRC-32 as used by PNG chunks (same polynomial as zlib)"""

from functools import lru_cache

CRC_POLYNOMIAL = 0xEDB88320


@lru_cache(maxsize=None)
def crc_table():
    """Table of CRCs of all 8 bits messages, built on first use"""
    table = []
    for n in range(256):
        c = n
        for _k in range(8):
            if c & 1:
                c = CRC_POLYNOMIAL ^ (c >> 1)
            else:
                c >>= 1
        table.append(c)
    return tuple(table)


def update_crc(crc: int, data: bytes) -> int:
    """Run data through a running (not finalized) CRC"""
    table = crc_table()
    c = crc & 0xFFFFFFFF
    for byte in data:
        c = table[(c ^ byte) & 0xFF] ^ (c >> 8)
    return c


def crc32(data: bytes) -> int:
    """Return the CRC of data"""
    return update_crc(0xFFFFFFFF, data) ^ 0xFFFFFFFF
