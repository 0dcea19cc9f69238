# 金钱财宝表, 出目 7~162
CASH_TREASURE_TABLE = {
    7: "35G",
    8: "40G",
    9: "40G",
    10: "40G",
    11: "45G",
    12: "45G",
    13: "45G",
    14: "50G",
    15: "50G",
    16: "50G",
    17: "55G",
    18: "55G",
    19: "60G",
    20: "60G",
    21: "65G",
    22: "70G",
    23: "70G",
    24: "75G",
    25: "75G",
    26: "80G",
    27: "85G",
    28: "85G",
    29: "90G",
    30: "95G",
    31: "100G",
    32: "100G",
    33: "105G",
    34: "110G",
    35: "115G",
    36: "120G",
    37: "125G",
    38: "130G",
    39: "135G",
    40: "140G",
    41: "145G",
    42: "150G",
    43: "155G",
    44: "160G",
    45: "165G",
    46: "170G",
    47: "175G",
    48: "180G",
    49: "185G",
    50: "195G",
    51: "200G",
    52: "205G",
    53: "210G",
    54: "220G",
    55: "225G",
    56: "230G",
    57: "240G",
    58: "245G",
    59: "255G",
    60: "260G",
    61: "265G",
    62: "275G",
    63: "280G",
    64: "290G",
    65: "300G",
    66: "300G",
    67: "310G",
    68: "320G",
    69: "330G",
    70: "340G",
    71: "340G",
    72: "350G",
    73: "360G",
    74: "370G",
    75: "380G",
    76: "390G",
    77: "400G",
    78: "410G",
    79: "420G",
    80: "430G",
    81: "440G",
    82: "450G",
    83: "460G",
    84: "460G",
    85: "480G",
    86: "490G",
    87: "500G",
    88: "510G",
    89: "520G",
    90: "530G",
    91: "540G",
    92: "550G",
    93: "560G",
    94: "570G",
    95: "580G",
    96: "590G",
    97: "610G",
    98: "620G",
    99: "630G",
    100: "640G",
    101: "650G",
    102: "660G",
    103: "680G",
    104: "690G",
    105: "700G",
    106: "710G",
    107: "730G",
    108: "740G",
    109: "750G",
    110: "760G",
    111: "780G",
    112: "790G",
    113: "800G",
    114: "820G",
    115: "830G",
    116: "840G",
    117: "860G",
    118: "870G",
    119: "890G",
    120: "900G",
    121: "910G",
    122: "930G",
    123: "940G",
    124: "960G",
    125: "970G",
    126: "990G",
    127: "1000G",
    128: "1020G",
    129: "1030G",
    130: "1050G",
    131: "1060G",
    132: "1080G",
    133: "1090G",
    134: "1110G",
    135: "1130G",
    136: "1140G",
    137: "1160G",
    138: "1170G",
    139: "1190G",
    140: "1210G",
    141: "1220G",
    142: "1240G",
    143: "1260G",
    144: "1270G",
    145: "1290G",
    146: "1310G",
    147: "1330G",
    148: "1340G",
    149: "1360G",
    150: "1380G",
    151: "1400G",
    152: "1410G",
    153: "1430G",
    154: "1450G",
    155: "1470G",
    156: "1490G",
    157: "1500G",
    158: "1520G",
    159: "1540G",
    160: "1560G",
    161: "1580G",
    162: "1600G",
}
