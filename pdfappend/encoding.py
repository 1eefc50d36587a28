# *-* coding: utf-8 *-*
"""
    Text encodings of PDF strings
    ~~~~~~~~~~~~~~~~~~~~~~~~~~~~~
    PDF text strings are either PDFDocEncoding (one byte per character)
    or UTF-16BE starting with a byte order mark.
"""
import codecs

# code points of PDFDocEncoding, None where the byte is undefined
PDFDOC_ENCODING = (
    [None] * 9 + [0x0009, 0x000a, None, None, 0x000d] + [None] * 10 +
    [0x02d8, 0x02c7, 0x02c6, 0x02d9, 0x02dd, 0x02db, 0x02da, 0x02dc] +
    list(range(0x20, 0x7f)) + [None] +
    [
        0x2022, 0x2020, 0x2021, 0x2026, 0x2014, 0x2013, 0x0192, 0x2044,
        0x2039, 0x203a, 0x2212, 0x2030, 0x201e, 0x201c, 0x201d, 0x2018,
        0x2019, 0x201a, 0x2122, 0xfb01, 0xfb02, 0x0141, 0x0152, 0x0160,
        0x0178, 0x017d, 0x0131, 0x0142, 0x0153, 0x0161, 0x017e, None,
    ] +
    [0x20ac] + list(range(0xa1, 0xad)) + [None] + list(range(0xae, 0x100))
)

_PDFDOC_REVERSE = dict(
    (chr(cp), i) for i, cp in enumerate(PDFDOC_ENCODING) if cp is not None
)


def is_pdfdoc_encoded(data):
    return all(PDFDOC_ENCODING[c] is not None for c in bytearray(data))


def pdfdoc_decode(data):
    return ''.join(
        chr(PDFDOC_ENCODING[c]) if PDFDOC_ENCODING[c] is not None else '\ufffd'
        for c in bytearray(data)
    )


def is_utf16(data):
    return (
        len(data) >= 2
        and len(data) % 2 == 0
        and data[:2] == codecs.BOM_UTF16_BE
    )


def utf16_decode(data):
    """Decode big-endian code units, the byte order mark already removed.
    Unpaired surrogates become U+FFFD.
    """
    return bytes(data).decode('utf-16-be', 'replace')


def decode_text(data):
    if is_utf16(data):
        return utf16_decode(data[2:])
    if is_pdfdoc_encoded(data):
        return pdfdoc_decode(data)
    return None


def encode_text(text):
    try:
        return bytes(bytearray(_PDFDOC_REVERSE[c] for c in text))
    except KeyError:
        return codecs.BOM_UTF16_BE + text.encode('utf-16-be')
