"""Windows locale identifier (LCID) resolution.

The table follows [MS-LCID] and maps 16-bit language identifiers to language
tags. Keyboard layout handles (HKL) carry the language identifier in their low
word; the low 10 bits of a language identifier are its primary language.
"""

from __future__ import annotations

from .canonicalize import UNKNOWN

PRIMARY_LANGUAGE_MASK = 0x3FF

LCID_TAGS = {
    0x0001: "ar",
    0x0002: "bg",
    0x0003: "ca",
    0x0004: "zh-CN",  # zh-Hans
    0x0005: "cs",
    0x0006: "da",
    0x0007: "de",
    0x0008: "el",
    0x0009: "en",
    0x000a: "es",
    0x000b: "fi",
    0x000c: "fr",
    0x000d: "he",
    0x000e: "hu",
    0x000f: "is",
    0x0010: "it",
    0x0011: "ja",
    0x0012: "ko",
    0x0013: "nl",
    0x0014: "no",
    0x0015: "pl",
    0x0016: "pt",
    0x0017: "rm",
    0x0018: "ro",
    0x0019: "ru",
    0x001a: "hr",
    0x001b: "sk",
    0x001c: "sq",
    0x001d: "sv",
    0x001e: "th",
    0x001f: "tr",
    0x0020: "ur",
    0x0021: "id",
    0x0022: "uk",
    0x0023: "be",
    0x0024: "sl",
    0x0025: "et",
    0x0026: "lv",
    0x0027: "lt",
    0x0028: "tg",
    0x0029: "fa",
    0x002a: "vi",
    0x002b: "hy",
    0x002c: "az",
    0x002d: "eu",
    0x002e: "hsb",
    0x002f: "mk",
    0x0036: "af",
    0x0037: "ka",
    0x0038: "fo",
    0x0039: "hi",
    0x003a: "mt",
    0x003b: "se",
    0x003c: "ga",
    0x003e: "ms",
    0x003f: "kk",
    0x0040: "ky",
    0x0041: "sw",
    0x0042: "tk",
    0x0043: "uz",
    0x0044: "tt",
    0x0045: "bn",
    0x0046: "pa",
    0x0047: "gu",
    0x0048: "or",
    0x0049: "ta",
    0x004a: "te",
    0x004b: "kn",
    0x004c: "ml",
    0x004d: "as",
    0x004e: "mr",
    0x004f: "sa",
    0x0050: "mn",
    0x0051: "bo",
    0x0052: "cy",
    0x0053: "km",
    0x0054: "lo",
    0x0056: "gl",
    0x0057: "kok",
    0x005a: "syr",
    0x005b: "si",
    0x005c: "chr",
    0x005d: "iu",
    0x005e: "am",
    0x005f: "tzm",
    0x0061: "ne",
    0x0062: "fy",
    0x0063: "ps",
    0x0064: "fil",
    0x0065: "dv",
    0x0067: "ff",
    0x0068: "ha",
    0x006a: "yo",
    0x006b: "quz",
    0x006c: "nso",
    0x006d: "ba",
    0x006e: "lb",
    0x006f: "kl",
    0x0070: "ig",
    0x0073: "ti",
    0x0078: "ii",
    0x007a: "arn",
    0x007e: "br",
    0x0080: "ug",
    0x0081: "mi",
    0x0082: "oc",
    0x0083: "co",
    0x0084: "gsw",
    0x0085: "sah",
    0x0087: "rw",
    0x0088: "wo",
    0x008c: "prs",
    0x0091: "gd",
    0x0092: "ku",
    0x0401: "ar",  # ar-SA
    0x0402: "bg",  # bg-BG
    0x0403: "ca",  # ca-ES
    0x0404: "zh-TW",
    0x0405: "cs",  # cs-CZ
    0x0406: "da",  # da-DK
    0x0407: "de",  # de-DE
    0x0408: "el",  # el-GR
    0x0409: "en",  # en-US
    0x040a: "es",  # es-ES_tradnl
    0x040b: "fi",  # fi-FI
    0x040c: "fr",  # fr-FR
    0x040d: "he",  # he-IL
    0x040e: "hu",  # hu-HU
    0x040f: "is",  # is-IS
    0x0410: "it",  # it-IT
    0x0411: "ja",  # ja-JP
    0x0412: "ko",  # ko-KR
    0x0413: "nl",  # nl-NL
    0x0414: "nb",  # nb-NO
    0x0415: "pl",  # pl-PL
    0x0416: "pt",  # pt-BR
    0x0417: "rm",  # rm-CH
    0x0418: "ro",  # ro-RO
    0x0419: "ru",  # ru-RU
    0x041a: "hr",  # hr-HR
    0x041b: "sk",  # sk-SK
    0x041c: "sq",  # sq-AL
    0x041d: "sv",  # sv-SE
    0x041e: "th",  # th-TH
    0x041f: "tr",  # tr-TR
    0x0420: "ur",  # ur-PK
    0x0421: "id",  # id-ID
    0x0422: "uk",  # uk-UA
    0x0423: "be",  # be-BY
    0x0424: "sl",  # sl-SI
    0x0425: "et",  # et-EE
    0x0426: "lv",  # lv-LV
    0x0427: "lt",  # lt-LT
    0x0428: "tg",  # tg-Cyrl-TJ
    0x0429: "fa",  # fa-IR
    0x042a: "vi",  # vi-VN
    0x042b: "hy",  # hy-AM
    0x042c: "az",  # az-Latn-AZ
    0x042d: "eu",  # eu-ES
    0x042e: "hsb",  # hsb-DE
    0x042f: "mk",  # mk-MK
    0x0436: "af",  # af-ZA
    0x0437: "ka",  # ka-GE
    0x0438: "fo",  # fo-FO
    0x0439: "hi",  # hi-IN
    0x043a: "mt",  # mt-MT
    0x043b: "se",  # se-NO
    0x043e: "ms",  # ms-MY
    0x043f: "kk",  # kk-KZ
    0x0440: "ky",  # ky-KG
    0x0441: "sw",  # sw-KE
    0x0442: "tk",  # tk-TM
    0x0443: "uz",  # uz-Latn-UZ
    0x0444: "tt",  # tt-RU
    0x0445: "bn",  # bn-IN
    0x0446: "pa",  # pa-IN
    0x0447: "gu",  # gu-IN
    0x0448: "or",  # or-IN
    0x0449: "ta",  # ta-IN
    0x044a: "te",  # te-IN
    0x044b: "kn",  # kn-IN
    0x044c: "ml",  # ml-IN
    0x044d: "as",  # as-IN
    0x044e: "mr",  # mr-IN
    0x044f: "sa",  # sa-IN
    0x0450: "mn",  # mn-MN
    0x0451: "bo",  # bo-CN
    0x0452: "cy",  # cy-GB
    0x0453: "km",  # km-KH
    0x0454: "lo",  # lo-LA
    0x0456: "gl",  # gl-ES
    0x0457: "kok",  # kok-IN
    0x045a: "syr",  # syr-SY
    0x045b: "si",  # si-LK
    0x045c: "chr",  # chr-Cher-US
    0x045d: "iu",  # iu-Cans-CA
    0x045e: "am",  # am-ET
    0x0461: "ne",  # ne-NP
    0x0462: "fy",  # fy-NL
    0x0463: "ps",  # ps-AF
    0x0464: "fil",  # fil-PH
    0x0465: "dv",  # dv-MV
    0x0467: "ff",  # ff-NG
    0x0468: "ha",  # ha-Latn-NG
    0x046a: "yo",  # yo-NG
    0x046b: "quz",  # quz-BO
    0x046c: "nso",  # nso-ZA
    0x046d: "ba",  # ba-RU
    0x046e: "lb",  # lb-LU
    0x046f: "kl",  # kl-GL
    0x0470: "ig",  # ig-NG
    0x0473: "ti",  # ti-ET
    0x0475: "haw",  # haw-US
    0x0478: "ii",  # ii-CN
    0x047a: "arn",  # arn-CL
    0x047c: "moh",  # moh-CA
    0x047e: "br",  # br-FR
    0x0480: "ug",  # ug-CN
    0x0481: "mi",  # mi-NZ
    0x0482: "oc",  # oc-FR
    0x0483: "co",  # co-FR
    0x0484: "gsw",  # gsw-FR
    0x0485: "sah",  # sah-RU
    0x0487: "rw",  # rw-RW
    0x0488: "wo",  # wo-SN
    0x048c: "prs",  # prs-AF
    0x0491: "gd",  # gd-GB
    0x0492: "ku",  # ku-Arab-IQ
    0x0801: "ar",  # ar-IQ
    0x0804: "zh-CN",
    0x0807: "de",  # de-CH
    0x0809: "en",  # en-GB
    0x080a: "es",  # es-MX
    0x080c: "fr",  # fr-BE
    0x0810: "it",  # it-CH
    0x0813: "nl",  # nl-BE
    0x0814: "nn",  # nn-NO
    0x0816: "pt",  # pt-PT
    0x081a: "sr",  # sr-Latn-CS
    0x081d: "sv",  # sv-FI
    0x082c: "az",  # az-Cyrl-AZ
    0x082e: "dsb",  # dsb-DE
    0x083b: "se",  # se-SE
    0x083c: "ga",  # ga-IE
    0x083e: "ms",  # ms-BN
    0x0843: "uz",  # uz-Cyrl-UZ
    0x0845: "bn",  # bn-BD
    0x0846: "pa",  # pa-Arab-PK
    0x0849: "ta",  # ta-LK
    0x0850: "mn",  # mn-Mong-CN
    0x0859: "sd",  # sd-Arab-PK
    0x085d: "iu",  # iu-Latn-CA
    0x085f: "tzm",  # tzm-Latn-DZ
    0x0861: "ne",  # ne-IN
    0x0867: "ff",  # ff-Latn-SN
    0x086b: "quz",  # quz-EC
    0x0873: "ti",  # ti-ER
    0x0c01: "ar",  # ar-EG
    0x0c04: "zh-HK",
    0x0c07: "de",  # de-AT
    0x0c09: "en",  # en-AU
    0x0c0a: "es",  # es-ES
    0x0c0c: "fr",  # fr-CA
    0x0c1a: "sr",  # sr-Cyrl-CS
    0x0c3b: "se",  # se-FI
    0x0c51: "dz",  # dz-BT
    0x0c6b: "quz",  # quz-PE
    0x1001: "ar",  # ar-LY
    0x1004: "zh-SG",
    0x1007: "de",  # de-LU
    0x1009: "en",  # en-CA
    0x100a: "es",  # es-GT
    0x100c: "fr",  # fr-CH
    0x101a: "hr",  # hr-BA
    0x103b: "smj",  # smj-NO
    0x1401: "ar",  # ar-DZ
    0x1404: "zh-MO",
    0x1407: "de",  # de-LI
    0x1409: "en",  # en-NZ
    0x140a: "es",  # es-CR
    0x140c: "fr",  # fr-LU
    0x141a: "bs",  # bs-Latn-BA
    0x143b: "smj",  # smj-SE
    0x1801: "ar",  # ar-MA
    0x1809: "en",  # en-IE
    0x180a: "es",  # es-PA
    0x180c: "fr",  # fr-MC
    0x181a: "sr",  # sr-Latn-BA
    0x183b: "sma",  # sma-NO
    0x1c01: "ar",  # ar-TN
    0x1c09: "en",  # en-ZA
    0x1c0a: "es",  # es-DO
    0x1c1a: "sr",  # sr-Cyrl-BA
    0x1c3b: "sma",  # sma-SE
    0x2001: "ar",  # ar-OM
    0x2009: "en",  # en-JM
    0x200a: "es",  # es-VE
    0x201a: "bs",  # bs-Cyrl-BA
    0x203b: "sms",  # sms-FI
    0x2401: "ar",  # ar-YE
    0x2409: "en",  # en-029
    0x240a: "es",  # es-CO
    0x240c: "fr",  # fr-CD
    0x241a: "sr",  # sr-Latn-RS
    0x243b: "smn",  # smn-FI
    0x2801: "ar",  # ar-SY
    0x2809: "en",  # en-BZ
    0x280a: "es",  # es-PE
    0x280c: "fr",  # fr-SN
    0x281a: "sr",  # sr-Cyrl-RS
    0x2c01: "ar",  # ar-JO
    0x2c09: "en",  # en-TT
    0x2c0a: "es",  # es-AR
    0x2c0c: "fr",  # fr-CM
    0x2c1a: "sr",  # sr-Latn-ME
    0x3001: "ar",  # ar-LB
    0x3009: "en",  # en-ZW
    0x300a: "es",  # es-EC
    0x300c: "fr",  # fr-CI
    0x301a: "sr",  # sr-Cyrl-ME
    0x3401: "ar",  # ar-KW
    0x3409: "en",  # en-PH
    0x340a: "es",  # es-CL
    0x340c: "fr",  # fr-ML
    0x3801: "ar",  # ar-AE
    0x380a: "es",  # es-UY
    0x380c: "fr",  # fr-MA
    0x3c01: "ar",  # ar-BH
    0x3c09: "en",  # en-HK
    0x3c0a: "es",  # es-PY
    0x3c0c: "fr",  # fr-HT
    0x4001: "ar",  # ar-QA
    0x4009: "en",  # en-IN
    0x400a: "es",  # es-BO
    0x4409: "en",  # en-MY
    0x440a: "es",  # es-SV
    0x4809: "en",  # en-SG
    0x480a: "es",  # es-HN
    0x4c09: "en",  # en-AE
    0x4c0a: "es",  # es-NI
    0x500a: "es",  # es-PR
    0x540a: "es",  # es-US
    0x580a: "es",  # es-419
    0x5c0a: "es",  # es-CU
    0x7c04: "zh-TW",  # zh-Hant
    0x7c14: "nb",
    0x7c1a: "sr",
    0x7c28: "tg",  # tg-Cyrl
    0x7c2e: "dsb",
    0x7c3b: "smj",
    0x7c43: "uz",  # uz-Latn
    0x7c46: "pa",  # pa-Arab
    0x7c50: "mn",  # mn-Mong
    0x7c59: "sd",  # sd-Arab
    0x7c5c: "chr",  # chr-Cher
    0x7c5d: "iu",  # iu-Latn
    0x7c5f: "tzm",  # tzm-Latn
    0x7c67: "ff",  # ff-Latn
    0x7c68: "ha",  # ha-Latn
    0x7c92: "ku",  # ku-Arab
}


def lcid_to_tag(lcid: int) -> str:
    """Look up a language identifier, returning ``UNKNOWN`` when unlisted."""
    return LCID_TAGS.get(lcid, UNKNOWN)


def primary_language_id(lcid: int) -> int:
    """Strip the sublanguage bits from a language identifier."""
    return lcid & PRIMARY_LANGUAGE_MASK


def resolve_lcid(lcid: int) -> str:
    """Resolve a language identifier, falling back to its primary language.

    Examples:
        >>> resolve_lcid(0x0409)
        'en'
        >>> resolve_lcid(0x0c12)  # unlisted Korean variant
        'ko'
        >>> resolve_lcid(0x0000)
        'unknown'
    """
    tag = lcid_to_tag(lcid)
    if tag == UNKNOWN:
        tag = lcid_to_tag(primary_language_id(lcid))
    return tag
