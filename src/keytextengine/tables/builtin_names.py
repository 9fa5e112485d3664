"""Compiled-in text name list.

NAMES is append-only: a name's position is its NameId and every table in
builtin_texts is aligned to this order. Insert nothing in the middle.

OVERRIDE_NAMES lists the action-key labels that come from the platform's
localized resources instead of the tables (see localization.providers).

Python 3.13+. Zero external dependencies.
"""

__all__ = ["NAMES", "OVERRIDE_NAMES"]

OVERRIDE_NAMES: tuple[str, ...] = (
    # Action keys
    "label_go_key",
    "label_send_key",
    "label_next_key",
    "label_done_key",
    "label_search_key",
    "label_previous_key",
    # Other keys
    "label_pause_key",
    "label_wait_key",
)

NAMES: tuple[str, ...] = (
    "more_keys_for_a",  # 0
    "more_keys_for_e",  # 1
    "more_keys_for_i",  # 2
    "more_keys_for_o",  # 3
    "more_keys_for_u",  # 4
    "more_keys_for_s",  # 5
    "more_keys_for_n",  # 6
    "more_keys_for_c",  # 7
    "more_keys_for_y",  # 8
    "more_keys_for_d",  # 9
    "more_keys_for_r",  # 10
    "more_keys_for_t",  # 11
    "more_keys_for_z",  # 12
    "more_keys_for_k",  # 13
    "more_keys_for_l",  # 14
    "more_keys_for_g",  # 15
    "more_keys_for_v",  # 16
    "more_keys_for_h",  # 17
    "more_keys_for_j",  # 18
    "more_keys_for_w",  # 19
    "keylabel_for_nordic_row1_11",  # 20
    "keylabel_for_nordic_row2_10",  # 21
    "keylabel_for_nordic_row2_11",  # 22
    "more_keys_for_nordic_row2_10",  # 23
    "more_keys_for_nordic_row2_11",  # 24
    "keylabel_for_east_slavic_row1_9",  # 25
    "keylabel_for_east_slavic_row1_12",  # 26
    "keylabel_for_east_slavic_row2_1",  # 27
    "keylabel_for_east_slavic_row2_11",  # 28
    "keylabel_for_east_slavic_row3_5",  # 29
    "more_keys_for_cyrillic_u",  # 30
    "more_keys_for_cyrillic_ka",  # 31
    "more_keys_for_cyrillic_en",  # 32
    "more_keys_for_cyrillic_ghe",  # 33
    "more_keys_for_east_slavic_row2_1",  # 34
    "more_keys_for_cyrillic_a",  # 35
    "more_keys_for_cyrillic_o",  # 36
    "more_keys_for_cyrillic_soft_sign",  # 37
    "more_keys_for_east_slavic_row2_11",  # 38
    "keylabel_for_south_slavic_row1_6",  # 39
    "keylabel_for_south_slavic_row2_11",  # 40
    "keylabel_for_south_slavic_row3_1",  # 41
    "keylabel_for_south_slavic_row3_8",  # 42
    "more_keys_for_cyrillic_ie",  # 43
    "more_keys_for_cyrillic_i",  # 44
    "label_to_alpha_key",  # 45
    "single_quotes",  # 46
    "double_quotes",  # 47
    "single_angle_quotes",  # 48
    "double_angle_quotes",  # 49
    "more_keys_for_currency_dollar",  # 50
    "keylabel_for_currency",  # 51
    "more_keys_for_currency",  # 52
    "more_keys_for_punctuation",  # 53
    "more_keys_for_star",  # 54
    "more_keys_for_bullet",  # 55
    "more_keys_for_plus",  # 56
    "more_keys_for_left_parenthesis",  # 57
    "more_keys_for_right_parenthesis",  # 58
    "more_keys_for_less_than",  # 59
    "more_keys_for_greater_than",  # 60
    "more_keys_for_arabic_diacritics",  # 61
    "keyhintlabel_for_arabic_diacritics",  # 62
    "keylabel_for_symbols_1",  # 63
    "keylabel_for_symbols_2",  # 64
    "keylabel_for_symbols_3",  # 65
    "keylabel_for_symbols_4",  # 66
    "keylabel_for_symbols_5",  # 67
    "keylabel_for_symbols_6",  # 68
    "keylabel_for_symbols_7",  # 69
    "keylabel_for_symbols_8",  # 70
    "keylabel_for_symbols_9",  # 71
    "keylabel_for_symbols_0",  # 72
    "label_to_symbol_key",  # 73
    "label_to_symbol_with_microphone_key",  # 74
    "additional_more_keys_for_symbols_1",  # 75
    "additional_more_keys_for_symbols_2",  # 76
    "additional_more_keys_for_symbols_3",  # 77
    "additional_more_keys_for_symbols_4",  # 78
    "additional_more_keys_for_symbols_5",  # 79
    "additional_more_keys_for_symbols_6",  # 80
    "additional_more_keys_for_symbols_7",  # 81
    "additional_more_keys_for_symbols_8",  # 82
    "additional_more_keys_for_symbols_9",  # 83
    "additional_more_keys_for_symbols_0",  # 84
    "more_keys_for_symbols_1",  # 85
    "more_keys_for_symbols_2",  # 86
    "more_keys_for_symbols_3",  # 87
    "more_keys_for_symbols_4",  # 88
    "more_keys_for_symbols_5",  # 89
    "more_keys_for_symbols_6",  # 90
    "more_keys_for_symbols_7",  # 91
    "more_keys_for_symbols_8",  # 92
    "more_keys_for_symbols_9",  # 93
    "more_keys_for_symbols_0",  # 94
    "keylabel_for_comma",  # 95
    "more_keys_for_comma",  # 96
    "keylabel_for_symbols_question",  # 97
    "keylabel_for_symbols_semicolon",  # 98
    "keylabel_for_symbols_percent",  # 99
    "more_keys_for_symbols_exclamation",  # 100
    "more_keys_for_symbols_question",  # 101
    "more_keys_for_symbols_semicolon",  # 102
    "more_keys_for_symbols_percent",  # 103
    "keylabel_for_tablet_comma",  # 104
    "keyhintlabel_for_tablet_comma",  # 105
    "more_keys_for_tablet_comma",  # 106
    "keyhintlabel_for_period",  # 107
    "more_keys_for_period",  # 108
    "keylabel_for_apostrophe",  # 109
    "keyhintlabel_for_apostrophe",  # 110
    "more_keys_for_apostrophe",  # 111
    "more_keys_for_q",  # 112
    "more_keys_for_x",  # 113
    "keylabel_for_q",  # 114
    "keylabel_for_w",  # 115
    "keylabel_for_y",  # 116
    "keylabel_for_x",  # 117
    "keylabel_for_spanish_row2_10",  # 118
    "more_keys_for_am_pm",  # 119
    "settings_as_more_key",  # 120
    "shortcut_as_more_key",  # 121
    "action_next_as_more_key",  # 122
    "action_previous_as_more_key",  # 123
    "label_to_more_symbol_key",  # 124
    "label_to_more_symbol_for_tablet_key",  # 125
    "label_tab_key",  # 126
    "label_to_phone_numeric_key",  # 127
    "label_to_phone_symbols_key",  # 128
    "label_time_am",  # 129
    "label_time_pm",  # 130
    "keylabel_for_popular_domain",  # 131
    "more_keys_for_popular_domain",  # 132
    "more_keys_for_smiley",  # 133
    "single_laqm_raqm",  # 134
    "single_laqm_raqm_rtl",  # 135
    "single_raqm_laqm",  # 136
    "double_laqm_raqm",  # 137
    "double_laqm_raqm_rtl",  # 138
    "double_raqm_laqm",  # 139
    "single_lqm_rqm",  # 140
    "single_9qm_lqm",  # 141
    "single_9qm_rqm",  # 142
    "double_lqm_rqm",  # 143
    "double_9qm_lqm",  # 144
    "double_9qm_rqm",  # 145
    "more_keys_for_single_quote",  # 146
    "more_keys_for_double_quote",  # 147
    "more_keys_for_tablet_double_quote",  # 148
    "emoji_key_as_more_key",  # 149
)
