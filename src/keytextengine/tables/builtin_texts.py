"""Compiled-in per-locale text tables.

Each table is aligned to builtin_names.NAMES: slot i holds the text for the
name with NameId i. ``None`` marks an absent slot, which falls back to the
DEFAULT table. Tables may stop early; missing trailing slots are absent too.

Values are raw templates. They may contain ``!text/<name>`` references,
backslash escapes, and markers of the key-spec layer (``!icon/``,
``!code/``, ``!fixedColumnOrder!``, ``!hasLabels!``) that this package passes
through untouched.

Python 3.13+. Zero external dependencies.
"""

# ruff: noqa: E501 - table rows mirror upstream keyboard data verbatim

__all__ = ["LOCALE_TEXTS"]

EMPTY = ""

# Default texts
LANGUAGE_DEFAULT: tuple[str | None, ...] = (
    # 0~
    EMPTY, EMPTY, EMPTY, EMPTY, EMPTY, EMPTY, EMPTY, EMPTY, EMPTY, EMPTY, EMPTY, EMPTY, EMPTY,
    EMPTY, EMPTY, EMPTY, EMPTY, EMPTY, EMPTY, EMPTY, EMPTY, EMPTY, EMPTY, EMPTY, EMPTY, EMPTY,
    EMPTY, EMPTY, EMPTY, EMPTY, EMPTY, EMPTY, EMPTY, EMPTY, EMPTY, EMPTY, EMPTY, EMPTY, EMPTY,
    EMPTY, EMPTY, EMPTY, EMPTY, EMPTY, EMPTY,
    # ~44
    "ABC",  # 45
    "!text/single_lqm_rqm",  # 46
    "!text/double_lqm_rqm",  # 47
    "!text/single_laqm_raqm",  # 48
    "!text/double_laqm_raqm",  # 49
    "$,\u00A2,\u00A3,\u20AC,\u00A5,\u20B1",  # 50
    "$",  # 51
    "$,\u00A2,\u20AC,\u00A3,\u00A5,\u20B1",  # 52
    "!fixedColumnOrder!8,;,/,(,),#,!,\\,,?,&,\\%,+,\",-,:,',@",  # 53
    "\u2020,\u2021,\u2605",  # 54
    "\u266A,\u2665,\u2660,\u2666,\u2663",  # 55
    "\u00B1",  # 56
    "!fixedColumnOrder!3,<,{,[",  # 57
    "!fixedColumnOrder!3,>,},]",  # 58
    "!fixedColumnOrder!3,\u2039,\u2264,\u00AB",  # 59
    "!fixedColumnOrder!3,\u203A,\u2265,\u00BB",  # 60
    EMPTY,  # 61
    EMPTY,  # 62
    "1",  # 63
    "2",  # 64
    "3",  # 65
    "4",  # 66
    "5",  # 67
    "6",  # 68
    "7",  # 69
    "8",  # 70
    "9",  # 71
    "0",  # 72
    "?123",  # 73
    "123",  # 74
    # 75~
    EMPTY, EMPTY, EMPTY, EMPTY, EMPTY, EMPTY, EMPTY, EMPTY, EMPTY, EMPTY,
    # ~84
    "\u00B9,\u00BD,\u2153,\u00BC,\u215B",  # 85
    "\u00B2,\u2154",  # 86
    "\u00B3,\u00BE,\u215C",  # 87
    "\u2074",  # 88
    "\u215D",  # 89
    EMPTY,  # 90
    "\u215E",  # 91
    EMPTY,  # 92
    EMPTY,  # 93
    "\u207F,\u2205",  # 94
    ",",  # 95
    EMPTY,  # 96
    "?",  # 97
    ";",  # 98
    "%",  # 99
    "\u00A1",  # 100
    "\u00BF",  # 101
    EMPTY,  # 102
    "\u2030",  # 103
    ",",  # 104
    # 105~
    EMPTY, EMPTY, EMPTY,
    # ~107
    "\u2026",  # 108
    "\'",  # 109
    "\"",  # 110
    "\"",  # 111
    EMPTY,  # 112
    EMPTY,  # 113
    "q",  # 114
    "w",  # 115
    "y",  # 116
    "x",  # 117
    EMPTY,  # 118
    "!fixedColumnOrder!2,!hasLabels!,!text/label_time_am,!text/label_time_pm",  # 119
    "!icon/settings_key|!code/key_settings",  # 120
    "!icon/shortcut_key|!code/key_shortcut",  # 121
    "!hasLabels!,!text/label_next_key|!code/key_action_next",  # 122
    "!hasLabels!,!text/label_previous_key|!code/key_action_previous",  # 123
    "= \\ <",  # 124
    "~ [ <",  # 125
    "Tab",  # 126
    "123",  # 127
    "\uFF0A\uFF03",  # 128
    "AM",  # 129
    "PM",  # 130
    ".com",  # 131
    "!hasLabels!,.net,.org,.gov,.edu",  # 132
    "!fixedColumnOrder!5,!hasLabels!,:)|:) ,;)|;) ,:(|:( ,:D|:D ,:P|:P ,^^|^^ ,-_-|-_- ,=-O|=-O ,:-P|:-P ,;-)|;-) ,:-(|:-( ,:-)|:-) ,:-!|:-! ,:-$|:-$ ,B-)|B-) ,:O|:O ,:-*|:-* ,:-D|:-D ,:\'(|:\'( ,:-\\\\|:-\\\\ ,O:-)|O:-) ,:-[|:-[ ",  # 133
    "\u2039,\u203A",  # 134
    "\u2039|\u203A,\u203A|\u2039",  # 135
    "\u203A,\u2039",  # 136
    "\u00AB,\u00BB",  # 137
    "\u00AB|\u00BB,\u00BB|\u00AB",  # 138
    "\u00BB,\u00AB",  # 139
    "\u201A,\u2018,\u2019",  # 140
    "\u2019,\u201A,\u2018",  # 141
    "\u2018,\u201A,\u2019",  # 142
    "\u201E,\u201C,\u201D",  # 143
    "\u201D,\u201E,\u201C",  # 144
    "\u201C,\u201E,\u201D",  # 145
    "!fixedColumnOrder!5,!text/single_quotes,!text/single_angle_quotes",  # 146
    "!fixedColumnOrder!5,!text/double_quotes,!text/double_angle_quotes",  # 147
    "!fixedColumnOrder!6,!text/double_quotes,!text/single_quotes,!text/double_angle_quotes,!text/single_angle_quotes",  # 148
    "!icon/emoji_key|!code/key_emoji",  # 149
)


# as: Assamese
LANGUAGE_as: tuple[str | None, ...] = (
    # 0~
    None, None, None, None, None, None, None, None, None, None, None, None, None, None, None,
    None, None, None, None, None, None, None, None, None, None, None, None, None, None, None,
    None, None, None, None, None, None, None, None, None, None, None, None, None, None, None,
    # ~44
    "\u0985",  # 45
    # 46~
    None, None, None, None, None, None, None, None, None, None, None, None, None, None, None,
    None, None,
    # ~62
    "\u09E7",  # 63
    "\u09E8",  # 64
    "\u09E9",  # 65
    "\u09EA",  # 66
    "\u09EB",  # 67
    "\u09EC",  # 68
    "\u09ED",  # 69
    "\u09EE",  # 70
    "\u09EF",  # 71
    "\u09E6",  # 72
    "\u09E7\u09E8\u09E9",  # 73
    None,  # 74
    "1",  # 75
    "2",  # 76
    "3",  # 77
    "4",  # 78
    "5",  # 79
    "6",  # 80
    "7",  # 81
    "8",  # 82
    "9",  # 83
    "0",  # 84
)


# bn: Bengali
LANGUAGE_bn: tuple[str | None, ...] = (
    # 0~
    None, None, None, None, None, None, None, None, None, None, None, None, None, None, None,
    None, None, None, None, None, None, None, None, None, None, None, None, None, None, None,
    None, None, None, None, None, None, None, None, None, None, None, None, None, None, None,
    # ~44
    "\u0985",  # 45
    # 46~
    None, None, None, None, None, None, None, None, None, None, None, None, None, None, None,
    None, None,
    # ~62
    "\u09E7",  # 63
    "\u09E8",  # 64
    "\u09E9",  # 65
    "\u09EA",  # 66
    "\u09EB",  # 67
    "\u09EC",  # 68
    "\u09ED",  # 69
    "\u09EE",  # 70
    "\u09EF",  # 71
    "\u09E6",  # 72
    "\u09E7\u09E8\u09E9",  # 73
    None,  # 74
    "1",  # 75
    "2",  # 76
    "3",  # 77
    "4",  # 78
    "5",  # 79
    "6",  # 80
    "7",  # 81
    "8",  # 82
    "9",  # 83
    "0",  # 84
)


# en: English
LANGUAGE_en: tuple[str | None, ...] = (
    "\u00E0,\u00E1,\u00E2,\u00E4,\u00E6,\u00E3,\u00E5,\u0101",  # 0
    "\u00E8,\u00E9,\u00EA,\u00EB,\u0113",  # 1
    "\u00EE,\u00EF,\u00ED,\u012B,\u00EC",  # 2
    "\u00F4,\u00F6,\u00F2,\u00F3,\u0153,\u00F8,\u014D,\u00F5",  # 3
    "\u00FB,\u00FC,\u00F9,\u00FA,\u016B",  # 4
    "\u00DF",  # 5
    "\u00F1",  # 6
    "\u00E7",  # 7
)


# hi: Hindi
LANGUAGE_hi: tuple[str | None, ...] = (
    # 0~
    None, None, None, None, None, None, None, None, None, None, None, None, None, None, None,
    None, None, None, None, None, None, None, None, None, None, None, None, None, None, None,
    None, None, None, None, None, None, None, None, None, None, None, None, None, None, None,
    # ~44
    "\u0915\u0916\u0917",  # 45
    # 46~
    None, None, None, None, None,
    # ~50
    "\u20B9",  # 51
    # 52~
    None, None, None, None, None, None, None, None, None, None, None,
    # ~62
    "\u0967",  # 63
    "\u0968",  # 64
    "\u0969",  # 65
    "\u096A",  # 66
    "\u096B",  # 67
    "\u096C",  # 68
    "\u096D",  # 69
    "\u096E",  # 70
    "\u096F",  # 71
    "\u0966",  # 72
    "?\u0967\u0968\u0969",  # 73
    "\u0967\u0968\u0969",  # 74
    "1",  # 75
    "2",  # 76
    "3",  # 77
    "4",  # 78
    "5",  # 79
    "6",  # 80
    "7",  # 81
    "8",  # 82
    "9",  # 83
    "0",  # 84
)


# kn: Kannada
LANGUAGE_kn: tuple[str | None, ...] = (
    # 0~
    None, None, None, None, None, None, None, None, None, None, None, None, None, None, None,
    None, None, None, None, None, None, None, None, None, None, None, None, None, None, None,
    None, None, None, None, None, None, None, None, None, None, None, None, None, None, None,
    # ~44
    "\u0C85",  # 45
    # 46~
    None, None, None, None, None, None, None, None, None, None, None, None, None, None, None,
    None, None,
    # ~62
    "\u0CE7",  # 63
    "\u0CE8",  # 64
    "\u0CE9",  # 65
    "\u0CEA",  # 66
    "\u0CEB",  # 67
    "\u0CEC",  # 68
    "\u0CED",  # 69
    "\u0CEE",  # 70
    "\u0CEF",  # 71
    "\u0CE6",  # 72
    "\u0CE7\u0CE8\u0CE9",  # 73
    None,  # 74
    "1",  # 75
    "2",  # 76
    "3",  # 77
    "4",  # 78
    "5",  # 79
    "6",  # 80
    "7",  # 81
    "8",  # 82
    "9",  # 83
    "0",  # 84
)


# ml: Malayalam
LANGUAGE_ml: tuple[str | None, ...] = (
    # 0~
    None, None, None, None, None, None, None, None, None, None, None, None, None, None, None,
    None, None, None, None, None, None, None, None, None, None, None, None, None, None, None,
    None, None, None, None, None, None, None, None, None, None, None, None, None, None, None,
    # ~44
    "\u0D05",  # 45
    # 46~
    None, None, None, None, None, None, None, None, None, None, None, None, None, None, None,
    None, None, None, None, None, None, None, None, None, None, None, None, None, None,
    # ~74
    "\u0D67",  # 75
    "\u0D68",  # 76
    "\u0D69",  # 77
    "\u0D6A",  # 78
    "\u0D6B",  # 79
    "\u0D6C",  # 80
    "\u0D6D",  # 81
    "\u0D6E",  # 82
    "\u0D6F",  # 83
    "\u0D66",  # 84
)


# mnw: Mon
LANGUAGE_mnw: tuple[str | None, ...] = (
    # 0~
    None, None, None, None, None, None, None, None, None, None, None, None, None, None, None,
    None, None, None, None, None, None, None, None, None, None, None, None, None, None, None,
    None, None, None, None, None, None, None, None, None, None, None, None, None, None, None,
    # ~44
    "\u1000",  # 45
    # 46~
    None, None, None, None, None, None, None, None, None, None, None, None, None, None, None,
    None, None,
    # ~62
    "\u1041",  # 63
    "\u1042",  # 64
    "\u1043",  # 65
    "\u1044",  # 66
    "\u1045",  # 67
    "\u1046",  # 68
    "\u1047",  # 69
    "\u1048",  # 70
    "\u1049",  # 71
    "\u1040",  # 72
    "\u1041",  # 73
    None,  # 74
    "1",  # 75
    "2",  # 76
    "3",  # 77
    "4",  # 78
    "5",  # 79
    "6",  # 80
    "7",  # 81
    "8",  # 82
    "9",  # 83
    "0",  # 84
)


# my: Burmese
LANGUAGE_my: tuple[str | None, ...] = (
    # 0~
    None, None, None, None, None, None, None, None, None, None, None, None, None, None, None,
    None, None, None, None, None, None, None, None, None, None, None, None, None, None, None,
    None, None, None, None, None, None, None, None, None, None, None, None, None, None, None,
    # ~44
    "\u1000",  # 45
    # 46~
    None, None, None, None, None, None, None, None, None, None, None, None, None, None, None,
    None, None,
    # ~62
    "\u1041",  # 63
    "\u1042",  # 64
    "\u1043",  # 65
    "\u1044",  # 66
    "\u1045",  # 67
    "\u1046",  # 68
    "\u1047",  # 69
    "\u1048",  # 70
    "\u1049",  # 71
    "\u1040",  # 72
    "\u1041",  # 73
    None,  # 74
    "1",  # 75
    "2",  # 76
    "3",  # 77
    "4",  # 78
    "5",  # 79
    "6",  # 80
    "7",  # 81
    "8",  # 82
    "9",  # 83
    "0",  # 84
)


# ne: Nepali
LANGUAGE_ne: tuple[str | None, ...] = (
    # 0~
    None, None, None, None, None, None, None, None, None, None, None, None, None, None, None,
    None, None, None, None, None, None, None, None, None, None, None, None, None, None, None,
    None, None, None, None, None, None, None, None, None, None, None, None, None, None, None,
    # ~44
    "\u0915\u0916\u0917",  # 45
    # 46~
    None, None, None, None, None,
    # ~50
    "\u0930\u0941.",  # 51
    # 52~
    None, None, None, None, None, None, None, None, None, None, None,
    # ~62
    "\u0967",  # 63
    "\u0968",  # 64
    "\u0969",  # 65
    "\u096A",  # 66
    "\u096B",  # 67
    "\u096C",  # 68
    "\u096D",  # 69
    "\u096E",  # 70
    "\u096F",  # 71
    "\u0966",  # 72
    "?\u0967\u0968\u0969",  # 73
    "\u0967\u0968\u0969",  # 74
    "1",  # 75
    "2",  # 76
    "3",  # 77
    "4",  # 78
    "5",  # 79
    "6",  # 80
    "7",  # 81
    "8",  # 82
    "9",  # 83
    "0",  # 84
)


# or: Oriya
LANGUAGE_or: tuple[str | None, ...] = (
    # 0~
    None, None, None, None, None, None, None, None, None, None, None, None, None, None, None,
    None, None, None, None, None, None, None, None, None, None, None, None, None, None, None,
    None, None, None, None, None, None, None, None, None, None, None, None, None, None, None,
    # ~44
    "\u0B05",  # 45
    # 46~
    None, None, None, None, None, None, None, None, None, None, None, None, None, None, None,
    None, None,
    # ~62
    "\u0B67",  # 63
    "\u0B68",  # 64
    "\u0B69",  # 65
    "\u0B6A",  # 66
    "\u0B6B",  # 67
    "\u0B6C",  # 68
    "\u0B6D",  # 69
    "\u0B6E",  # 70
    "\u0B6F",  # 71
    "\u0B66",  # 72
    "\u0B67\u0B68\u0B69",  # 73
    None,  # 74
    "1",  # 75
    "2",  # 76
    "3",  # 77
    "4",  # 78
    "5",  # 79
    "6",  # 80
    "7",  # 81
    "8",  # 82
    "9",  # 83
    "0",  # 84
)


# pa: Panjabi
LANGUAGE_pa: tuple[str | None, ...] = (
    # 0~
    None, None, None, None, None, None, None, None, None, None, None, None, None, None, None,
    None, None, None, None, None, None, None, None, None, None, None, None, None, None, None,
    None, None, None, None, None, None, None, None, None, None, None, None, None, None, None,
    # ~44
    "\u0A05",  # 45
    # 46~
    None, None, None, None, None, None, None, None, None, None, None, None, None, None, None,
    None, None,
    # ~62
    "\u0A67",  # 63
    "\u0A68",  # 64
    "\u0A69",  # 65
    "\u0A6A",  # 66
    "\u0A6B",  # 67
    "\u0A6C",  # 68
    "\u0A6D",  # 69
    "\u0A6E",  # 70
    "\u0A6F",  # 71
    "\u0A66",  # 72
    "\u0A67\u0A68\u0A69",  # 73
    None,  # 74
    "1",  # 75
    "2",  # 76
    "3",  # 77
    "4",  # 78
    "5",  # 79
    "6",  # 80
    "7",  # 81
    "8",  # 82
    "9",  # 83
    "0",  # 84
)


# ta: Tamil
LANGUAGE_ta: tuple[str | None, ...] = (
    # 0~
    None, None, None, None, None, None, None, None, None, None, None, None, None, None, None,
    None, None, None, None, None, None, None, None, None, None, None, None, None, None, None,
    None, None, None, None, None, None, None, None, None, None, None, None, None, None, None,
    # ~44
    "\u0B85",  # 45
    # 46~
    None, None, None, None, None, None, None, None, None, None, None, None, None, None, None,
    None, None,
    # ~62
    "\u0BE7",  # 63
    "\u0BE8",  # 64
    "\u0BE9",  # 65
    "\u0BEA",  # 66
    "\u0BEB",  # 67
    "\u0BEC",  # 68
    "\u0BED",  # 69
    "\u0BEE",  # 70
    "\u0BEF",  # 71
    "\u0BE6",  # 72
    "\u0BE7\u0BE8\u0BE9",  # 73
    None,  # 74
    "1",  # 75
    "2",  # 76
    "3",  # 77
    "4",  # 78
    "5",  # 79
    "6",  # 80
    "7",  # 81
    "8",  # 82
    "9",  # 83
    "0",  # 84
)


# te: Telugu
LANGUAGE_te: tuple[str | None, ...] = (
    # 0~
    None, None, None, None, None, None, None, None, None, None, None, None, None, None, None,
    None, None, None, None, None, None, None, None, None, None, None, None, None, None, None,
    None, None, None, None, None, None, None, None, None, None, None, None, None, None, None,
    # ~44
    "\u0C05",  # 45
    # 46~
    None, None, None, None, None, None, None, None, None, None, None, None, None, None, None,
    None, None,
    # ~62
    "\u0C67",  # 63
    "\u0C68",  # 64
    "\u0C69",  # 65
    "\u0C6A",  # 66
    "\u0C6B",  # 67
    "\u0C6C",  # 68
    "\u0C6D",  # 69
    "\u0C6E",  # 70
    "\u0C6F",  # 71
    "\u0C66",  # 72
    "\u0C67\u0C68\u0C69",  # 73
    None,  # 74
    "1",  # 75
    "2",  # 76
    "3",  # 77
    "4",  # 78
    "5",  # 79
    "6",  # 80
    "7",  # 81
    "8",  # 82
    "9",  # 83
    "0",  # 84
)


# zz: Alphabet
LANGUAGE_zz: tuple[str | None, ...] = (
    "\u00E0,\u00E1,\u00E2,\u00E3,\u00E4,\u00E5,\u00E6,\u00E3,\u00E5,\u0101,\u0103,\u0105,\u00AA",  # 0
    "\u00E8,\u00E9,\u00EA,\u00EB,\u0113,\u0115,\u0117,\u0119,\u011B",  # 1
    "\u00EC,\u00ED,\u00EE,\u00EF,\u0129,\u012B,\u012D,\u012F,\u0131,\u0133",  # 2
    "\u00F2,\u00F3,\u00F4,\u00F5,\u00F6,\u00F8,\u014D,\u014F,\u0151,\u0153,\u00BA",  # 3
    "\u00F9,\u00FA,\u00FB,\u00FC,\u0169,\u016B,\u016D,\u016F,\u0171,\u0173",  # 4
    "\u00DF,\u015B,\u015D,\u015F,\u0161,\u017F",  # 5
    "\u00F1,\u0144,\u0146,\u0148,\u0149,\u014B",  # 6
    "\u00E7,\u0107,\u0109,\u010B,\u010D",  # 7
    "\u00FD,\u0177,\u00FF,\u0133",  # 8
    "\u010F,\u0111,\u00F0",  # 9
    "\u0155,\u0157,\u0159",  # 10
    "\u00FE,\u0163,\u0165,\u0167",  # 11
    "\u017A,\u017C,\u017E",  # 12
    "\u0137,\u0138",  # 13
    "\u013A,\u013C,\u013E,\u0140,\u0142",  # 14
    "\u011D,\u011F,\u0121,\u0123",  # 15
    None,  # 16
    "\u0125",  # 17
    "\u0135",  # 18
    "\u0175",  # 19
)


LOCALE_TEXTS: dict[str, tuple[str | None, ...]] = {
    "DEFAULT": LANGUAGE_DEFAULT,
    "as": LANGUAGE_as,  # Assamese
    "bn": LANGUAGE_bn,  # Bengali
    "en": LANGUAGE_en,  # English
    "hi": LANGUAGE_hi,  # Hindi
    "kn": LANGUAGE_kn,  # Kannada
    "ml": LANGUAGE_ml,  # Malayalam
    "mnw": LANGUAGE_mnw,  # Mon
    "my": LANGUAGE_my,  # Burmese
    "ne": LANGUAGE_ne,  # Nepali
    "or": LANGUAGE_or,  # Oriya
    "pa": LANGUAGE_pa,  # Panjabi
    "ta": LANGUAGE_ta,  # Tamil
    "te": LANGUAGE_te,  # Telugu
    "zz": LANGUAGE_zz,  # Alphabet
}
