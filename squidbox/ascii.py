"""Character codes of the display font (code page 437)."""

from __future__ import annotations

from enum import IntEnum

# Code page 437 draws glyphs for the control range; the codec does not.
_CONTROL_GLYPHS = (
    "\x00☺☻♥♦♣♠•◘○◙♂♀♪♫☼►◄↕‼¶§▬↨↑↓→←∟↔▲▼"
)
_DELETE_GLYPH = "⌂"


class Ascii(IntEnum):
    """Every character code from 0 to 255 of the display font."""

    NULL = 0
    EMPTY_SMILEY = 1
    SMILEY = 2
    HEART = 3
    DIAMOND = 4
    CLUB = 5
    SPADE = 6
    DOT = 7
    INVERSE_DOT = 8
    CIRCLE = 9
    INVERSE_CIRCLE = 10
    MALE_MARS = 11
    FEMALE_VENUS = 12
    SINGLE_NOTE = 13
    DOUBLE_NOTE = 14
    STAR = 15
    RIGHT_FAT_ARROW = 16
    LEFT_FAT_ARROW = 17
    DOUBLE_VERTICAL_ARROW = 18
    DOUBLE_EXCLAMATION_MARK = 19
    PARAGRAPH = 20
    SECTION = 21
    BAR = 22
    UNDERSCORED_DOUBLE_VERTICAL_ARROW = 23
    UP_ARROW = 24
    DOWN_ARROW = 25
    RIGHT_ARROW = 26
    LEFT_ARROW = 27
    INVERTED_NOT_SIGN = 28
    DOUBLE_HORIZONTAL_ARROW = 29
    UP_FAT_ARROW = 30
    DOWN_FAT_ARROW = 31
    SPACE = 32
    EXCLAMATION_MARK = 33
    QUOTES = 34
    HASH = 35
    DOLLAR = 36
    PERCENT = 37
    AMPERSAND = 38
    APOSTROPHE = 39
    OPEN_BRACKET = 40
    CLOSE_BRACKET = 41
    ASTERISK = 42
    PLUS = 43
    COMMA = 44
    DASH = 45
    FULL_STOP = 46
    SLASH = 47
    ZERO = 48
    ONE = 49
    TWO = 50
    THREE = 51
    FOUR = 52
    FIVE = 53
    SIX = 54
    SEVEN = 55
    EIGHT = 56
    NINE = 57
    COLON = 58
    SEMI_COLON = 59
    LESS_THAN = 60
    EQUALS = 61
    GREATER_THAN = 62
    QUESTION_MARK = 63
    AT = 64
    UPPERCASE_A = 65
    UPPERCASE_B = 66
    UPPERCASE_C = 67
    UPPERCASE_D = 68
    UPPERCASE_E = 69
    UPPERCASE_F = 70
    UPPERCASE_G = 71
    UPPERCASE_H = 72
    UPPERCASE_I = 73
    UPPERCASE_J = 74
    UPPERCASE_K = 75
    UPPERCASE_L = 76
    UPPERCASE_M = 77
    UPPERCASE_N = 78
    UPPERCASE_O = 79
    UPPERCASE_P = 80
    UPPERCASE_Q = 81
    UPPERCASE_R = 82
    UPPERCASE_S = 83
    UPPERCASE_T = 84
    UPPERCASE_U = 85
    UPPERCASE_V = 86
    UPPERCASE_W = 87
    UPPERCASE_X = 88
    UPPERCASE_Y = 89
    UPPERCASE_Z = 90
    OPEN_SQUARE_BRACKET = 91
    BACKSLASH = 92
    CLOSE_SQUARE_BRACKET = 93
    CARET = 94
    UNDERSCORE = 95
    GRAVE_ACCENT = 96
    LOWERCASE_A = 97
    LOWERCASE_B = 98
    LOWERCASE_C = 99
    LOWERCASE_D = 100
    LOWERCASE_E = 101
    LOWERCASE_F = 102
    LOWERCASE_G = 103
    LOWERCASE_H = 104
    LOWERCASE_I = 105
    LOWERCASE_J = 106
    LOWERCASE_K = 107
    LOWERCASE_L = 108
    LOWERCASE_M = 109
    LOWERCASE_N = 110
    LOWERCASE_O = 111
    LOWERCASE_P = 112
    LOWERCASE_Q = 113
    LOWERCASE_R = 114
    LOWERCASE_S = 115
    LOWERCASE_T = 116
    LOWERCASE_U = 117
    LOWERCASE_V = 118
    LOWERCASE_W = 119
    LOWERCASE_X = 120
    LOWERCASE_Y = 121
    LOWERCASE_Z = 122
    OPEN_BRACE = 123
    PIPE = 124
    CLOSE_BRACE = 125
    TILDE = 126
    DELETE = 127
    LATIN_CAPITAL_LETTER_C_WITH_CEDILLA = 128
    LATIN_SMALL_LETTER_U_WITH_DIAERESIS = 129
    LATIN_SMALL_LETTER_E_WITH_ACUTE = 130
    LATIN_SMALL_LETTER_A_WITH_CIRCUMFLEX = 131
    LATIN_SMALL_LETTER_A_WITH_DIAERESIS = 132
    LATIN_SMALL_LETTER_A_WITH_GRAVE = 133
    LATIN_SMALL_LETTER_A_WITH_RING_ABOVE = 134
    LATIN_SMALL_LETTER_C_WITH_CEDILLA = 135
    LATIN_SMALL_LETTER_E_WITH_CIRCUMFLEX = 136
    LATIN_SMALL_LETTER_E_WITH_DIAERESIS = 137
    LATIN_SMALL_LETTER_E_WITH_GRAVE = 138
    LATIN_SMALL_LETTER_I_WITH_DIAERESIS = 139
    LATIN_SMALL_LETTER_I_WITH_CIRCUMFLEX = 140
    LATIN_SMALL_LETTER_I_WITH_GRAVE = 141
    LATIN_CAPITAL_LETTER_A_WITH_DIAERESIS = 142
    LATIN_CAPITAL_LETTER_A_WITH_RING_ABOVE = 143
    LATIN_CAPITAL_LETTER_E_WITH_ACUTE = 144
    LATIN_SMALL_LIGATURE_AE = 145
    LATIN_CAPITAL_LIGATURE_AE = 146
    LATIN_SMALL_LETTER_O_WITH_CIRCUMFLEX = 147
    LATIN_SMALL_LETTER_O_WITH_DIAERESIS = 148
    LATIN_SMALL_LETTER_O_WITH_GRAVE = 149
    LATIN_SMALL_LETTER_U_WITH_CIRCUMFLEX = 150
    LATIN_SMALL_LETTER_U_WITH_GRAVE = 151
    LATIN_SMALL_LETTER_Y_WITH_DIAERESIS = 152
    LATIN_CAPITAL_LETTER_O_WITH_DIAERESIS = 153
    LATIN_CAPITAL_LETTER_U_WITH_DIAERESIS = 154
    CENT_SIGN = 155
    POUND_SIGN = 156
    YEN_SIGN = 157
    PESETA_SIGN = 158
    LATIN_SMALL_LETTER_F_WITH_HOOK = 159
    LATIN_SMALL_LETTER_A_WITH_ACUTE = 160
    LATIN_SMALL_LETTER_I_WITH_ACUTE = 161
    LATIN_SMALL_LETTER_O_WITH_ACUTE = 162
    LATIN_SMALL_LETTER_U_WITH_ACUTE = 163
    LATIN_SMALL_LETTER_N_WITH_TILDE = 164
    LATIN_CAPITAL_LETTER_N_WITH_TILDE = 165
    FEMININE_ORDINAL_INDICATOR = 166
    MASCULINE_ORDINAL_INDICATOR = 167
    INVERTED_QUESTION_MARK = 168
    REVERSED_NOT_SIGN = 169
    NOT_SIGN = 170
    VULGAR_FRACTION_ONE_HALF = 171
    VULGAR_FRACTION_ONE_QUARTER = 172
    INVERTED_EXCLAMATION_MARK = 173
    LEFT_POINTING_DOUBLE_ANGLE_QUOTATION_MARK = 174
    RIGHT_POINTING_DOUBLE_ANGLE_QUOTATION_MARK = 175
    LIGHT_SHADE = 176
    MEDIUM_SHADE = 177
    DARK_SHADE = 178
    BOX_DRAWINGS_LIGHT_VERTICAL = 179
    BOX_DRAWINGS_LIGHT_VERTICAL_AND_LEFT = 180
    BOX_DRAWINGS_VERTICAL_SINGLE_AND_LEFT_DOUBLE = 181
    BOX_DRAWINGS_VERTICAL_DOUBLE_AND_LEFT_SINGLE = 182
    BOX_DRAWINGS_DOWN_DOUBLE_AND_LEFT_SINGLE = 183
    BOX_DRAWINGS_DOWN_SINGLE_AND_LEFT_DOUBLE = 184
    BOX_DRAWINGS_DOUBLE_VERTICAL_AND_LEFT = 185
    BOX_DRAWINGS_DOUBLE_VERTICAL = 186
    BOX_DRAWINGS_DOUBLE_DOWN_AND_LEFT = 187
    BOX_DRAWINGS_DOUBLE_UP_AND_LEFT = 188
    BOX_DRAWINGS_UP_DOUBLE_AND_LEFT_SINGLE = 189
    BOX_DRAWINGS_UP_SINGLE_AND_LEFT_DOUBLE = 190
    BOX_DRAWINGS_LIGHT_DOWN_AND_LEFT = 191
    BOX_DRAWINGS_LIGHT_UP_AND_RIGHT = 192
    BOX_DRAWINGS_LIGHT_UP_AND_HORIZONTAL = 193
    BOX_DRAWINGS_LIGHT_DOWN_AND_HORIZONTAL = 194
    BOX_DRAWINGS_LIGHT_VERTICAL_AND_RIGHT = 195
    BOX_DRAWINGS_LIGHT_HORIZONTAL = 196
    BOX_DRAWINGS_LIGHT_VERTICAL_AND_HORIZONTAL = 197
    BOX_DRAWINGS_VERTICAL_SINGLE_AND_RIGHT_DOUBLE = 198
    BOX_DRAWINGS_VERTICAL_DOUBLE_AND_RIGHT_SINGLE = 199
    BOX_DRAWINGS_DOUBLE_UP_AND_RIGHT = 200
    BOX_DRAWINGS_DOUBLE_DOWN_AND_RIGHT = 201
    BOX_DRAWINGS_DOUBLE_UP_AND_HORIZONTAL = 202
    BOX_DRAWINGS_DOUBLE_DOWN_AND_HORIZONTAL = 203
    BOX_DRAWINGS_DOUBLE_VERTICAL_AND_RIGHT = 204
    BOX_DRAWINGS_DOUBLE_HORIZONTAL = 205
    BOX_DRAWINGS_DOUBLE_VERTICAL_AND_HORIZONTAL = 206
    BOX_DRAWINGS_UP_SINGLE_AND_HORIZONTAL_DOUBLE = 207
    BOX_DRAWINGS_UP_DOUBLE_AND_HORIZONTAL_SINGLE = 208
    BOX_DRAWINGS_DOWN_SINGLE_AND_HORIZONTAL_DOUBLE = 209
    BOX_DRAWINGS_DOWN_DOUBLE_AND_HORIZONTAL_SINGLE = 210
    BOX_DRAWINGS_UP_DOUBLE_AND_RIGHT_SINGLE = 211
    BOX_DRAWINGS_UP_SINGLE_AND_RIGHT_DOUBLE = 212
    BOX_DRAWINGS_DOWN_SINGLE_AND_RIGHT_DOUBLE = 213
    BOX_DRAWINGS_DOWN_DOUBLE_AND_RIGHT_SINGLE = 214
    BOX_DRAWINGS_VERTICAL_DOUBLE_AND_HORIZONTAL_SINGLE = 215
    BOX_DRAWINGS_VERTICAL_SINGLE_AND_HORIZONTAL_DOUBLE = 216
    BOX_DRAWINGS_LIGHT_UP_AND_LEFT = 217
    BOX_DRAWINGS_LIGHT_DOWN_AND_RIGHT = 218
    FULL_BLOCK = 219
    LOWER_HALF_BLOCK = 220
    LEFT_HALF_BLOCK = 221
    RIGHT_HALF_BLOCK = 222
    UPPER_HALF_BLOCK = 223
    GREEK_SMALL_LETTER_ALPHA = 224
    LATIN_SMALL_LETTER_SHARP_S = 225
    GREEK_CAPITAL_LETTER_GAMMA = 226
    GREEK_SMALL_LETTER_PI = 227
    GREEK_CAPITAL_LETTER_SIGMA = 228
    GREEK_SMALL_LETTER_SIGMA = 229
    MICRO_SIGN = 230
    GREEK_SMALL_LETTER_TAU = 231
    GREEK_CAPITAL_LETTER_PHI = 232
    GREEK_CAPITAL_LETTER_THETA = 233
    GREEK_CAPITAL_LETTER_OMEGA = 234
    GREEK_SMALL_LETTER_DELTA = 235
    INFINITY = 236
    GREEK_SMALL_LETTER_PHI = 237
    GREEK_SMALL_LETTER_EPSILON = 238
    INTERSECTION = 239
    IDENTICAL_TO = 240
    PLUS_MINUS_SIGN = 241
    GREATER_THAN_OR_EQUAL_TO = 242
    LESS_THAN_OR_EQUAL_TO = 243
    TOP_HALF_INTEGRAL = 244
    BOTTOM_HALF_INTEGRAL = 245
    DIVISION_SIGN = 246
    ALMOST_EQUAL_TO = 247
    DEGREE_SIGN = 248
    BULLET_OPERATOR = 249
    MIDDLE_DOT = 250
    SQUARE_ROOT = 251
    SUPERSCRIPT_LATIN_SMALL_LETTER_N = 252
    SUPERSCRIPT_TWO = 253
    BLACK_SQUARE = 254
    NO_BREAK_SPACE = 255

    def char(self):
        """Return the glyph this code draws, as a one-character string."""
        if self < len(_CONTROL_GLYPHS):
            return _CONTROL_GLYPHS[self]
        if self == Ascii.DELETE:
            return _DELETE_GLYPH
        return bytes([self]).decode("cp437")