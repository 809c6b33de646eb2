"""
ICAO 24-bit address allocation rules.

Each entry is (binary_prefix, label) or (binary_prefix, label, overrides),
where overrides is a tuple of entries evaluated in order once the enclosing
prefix has matched. The first matching top-level entry wins, so a more
specific prefix must precede any shorter prefix that covers it. Blocks of
the allocation chart are listed 4-bit first, then 6, 9, 12 and 14 bits.

REGIONAL_RULES are consulted only when no top-level entry matches.

Derived from ICAO Annex 10 Volume III, Chapter 9 (Aircraft Addressing
System). Military and territory overrides come from observed transponder
activity and are not authoritative.
"""

UNKNOWN_REGISTRY = "Registry?"

TOP_LEVEL_RULES = (
    # 4-bit blocks
    ("0001", "Russia"),
    ("1010", "U.S.", (
        ("1010111", "U.S. Military"),
        ("1010110111111", "U.S. Military"),
        ("1010110111110111111", "U.S. Military"),
        ("10101101111101111101", "U.S. Military"),
        ("101011011111011111001", "U.S. Military"),
    )),

    # 6-bit blocks
    ("111000", "Argentina", (
        ("111000010100110000110001", "Argentina Military"),
        ("111000010100110000110010", "Argentina Military"),
        ("111000010100110000110011", "Argentina Military"),
        ("111000010100110001110000", "Argentina Military"),
    )),
    ("011111", "Australia", (
        ("0111111", "Australia Military"),
        ("01111101", "Australia Military"),
        ("0111110011", "Australia Military"),
        ("01111100101", "Australia Military"),
        ("011111001001", "Australia Military"),
        ("0111110010001", "Australia Military"),
        ("01111100100001", "Australia Military"),
        ("0111110010000011", "Australia Military"),
        ("01111100100000101", "Australia Military"),
        ("011111001000001001", "Australia Military"),
        ("01111100100000100011", "Australia Military"),
        ("01111100100000100010111", "Australia Military"),
    )),
    ("111001", "Brazil", (
        ("11100100000", "Brazil Military"),
        ("111001001000100110111001", "Brazil Military"),
        ("111001000111110111111110", "Brazil Military"),
        ("111001000111111001000000", "Brazil Military"),
        ("111001001000000111110110", "Brazil Military"),
        ("111001001000000111110111", "Brazil Military"),
        ("111001001000001110111010", "Brazil Military"),
        ("111001001000001110111011", "Brazil Military"),
        ("111001001000100101101010", "Brazil Military"),
        ("111001001000001011000010", "Brazil Military"),
        ("111001001000001011000011", "Brazil Military"),
        ("111001001000010001000011", "Brazil Military"),
        ("111001001000010001000100", "Brazil Military"),
        ("111001001000010111100111", "Brazil Military"),
        ("111001001000010111101000", "Brazil Military"),
        ("111001001000010111101001", "Brazil Military"),
        ("111001001000100100011111", "Brazil Military"),
        ("111001001000100100100000", "Brazil Military"),
        ("111001001000100100100001", "Brazil Military"),
        ("111001001000001110101000", "Brazil Military"),
        ("111001001000001110101010", "Brazil Military"),
        ("111001001000001110101011", "Brazil Military"),
    )),
    ("110000", "Canada", (
        ("1100001", "Canada Military"),
    )),
    ("011110", "China", (
        ("0111100000000001000", "China"),
        ("0111100000000001", "China Hong Kong"),
        ("011110000000001000", "China Hong Kong"),
        ("011110000000101000", "China Hong Kong"),
        ("0111100000001010010", "China Hong Kong"),
        ("011110000000001100111", "China Macau"),
        ("011110000000001101000", "China Macau"),
    )),
    ("001110", "France", (
        ("00111011", "France Military"),
        ("001110101", "France Military"),
        ("001110000000001001011011", "France Military"),
        ("001110000000110100011011", "France Military"),
        ("001110000001111001111011", "France Military"),
        ("001110000001110000111011", "France Military"),
        ("001110000001111000111011", "France Military"),
        ("001110000001101110111011", "France Military"),
        ("001110000000110100111011", "France Military"),
    )),
    ("001111", "Germany", (
        ("0011111010", "Germany Military"),
        ("0011111101", "Germany Military"),
        ("0011111110", "Germany Military"),
    )),
    ("100000", "India", (
        ("1000000000000010", "India Military"),
        ("100000000000001100001101", "India Military"),
        ("100000000000000001111000", "India Military"),
        ("100000000000000001111001", "India Military"),
        ("100000000000000011010110", "India Military"),
        ("100000011110000011100011", "India Military"),
    )),
    ("001100", "Italy", (
        ("0011001111111111", "Italy Military"),
    )),
    ("100001", "Japan", (
        ("100001111100110000001010", "Japan Military"),
        ("100001111100000000000000", "Japan Military"),
        ("100001111100000000000001", "Japan Military"),
        ("100001111100110000000001", "Japan Military"),
        ("100001111100110000001011", "Japan Military"),
        ("100001111100110000001000", "Japan Military"),
        ("100001111100110000001001", "Japan Military"),
    )),
    ("001101", "Spain", (
        ("0011011", "Spain Military"),
        ("00110100", "Spain Military"),
    )),
    ("010000", "U.K.", (
        ("010000100100010110111010", "Montserrat"),
        ("010000100100000111110100", "Falkland Is."),
        ("010000100100000111110101", "Falkland Is."),
        ("010000100100000111110110", "Falkland Is."),
        ("010000100100000111110111", "Falkland Is."),
        ("010000111011111001011011", "Falkland Is."),
        ("010000000000110111111101", "U.K. Military"),
        ("010000000000110111111110", "U.K. Military"),
        ("010000000000110111111111", "U.K. Military"),
        ("01000011111100101100111", "U.K. Jersey"),
        ("01000011111001110001011", "Isle of Man"),
        ("0100001001000001001101", "Cayman Islands"),
        ("0100001001000001001100", "Bermuda"),
        ("0100000000000000100010", "Cayman Islands"),
        ("010000000000000011010", "Cayman Islands"),
        ("010000000000000010000", "Cayman Islands"),
        ("010000111110011100011", "Isle of Man"),
        ("010000100100000100111", "Cayman Islands"),
        ("010000100100100011011", "Bermuda"),
        ("01000010010000010010", "Bermuda"),
        ("01000010010000100011", "Bermuda"),
        ("01000010010000010011", "Cayman Islands"),
        ("01000010010010100000", "Bermuda"),
        ("01000000000000001100", "Cayman Islands"),
        ("0100001110111110100", "Bermuda"),
        ("0100001111100111001", "Isle of Man"),
        ("0100001001000001100", "Cayman Islands"),
        ("0100001001000001101", "Cayman Islands"),
        ("0100001001000001110", "Cayman Islands"),
        ("0100001001000001000", "Bermuda"),
        ("0100001001000010100", "Bermuda"),
        ("0100001001000110000", "Bermuda"),
        ("0100001001001000111", "Bermuda"),
        ("010000111110011101", "Isle of Man"),
        ("010000100100000101", "Cayman Islands"),
        ("010000100100001001", "Bermuda"),
        ("010000000000000110", "Bermuda"),
        ("010000000000000001", "Cayman Islands"),
        ("010000000000000111", "Cayman Islands"),
        ("010000000000000000", "U.K. MoD"),
        ("01000011111001111", "Isle of Man"),
        ("01000000000000001", "Bermuda"),
        ("01000000000000010", "Bermuda"),
        ("0100001111101010", "Isle of Man"),
        ("0100001001000000", "Bermuda"),
        ("0100001001000101", "Bermuda"),
        ("0100001001001001", "Bermuda"),
        ("010000111110100", "Isle of Man"),
        ("0100001111101", "U.K. Guernsey"),
        ("0100001111", "U.K. Military"),
    )),

    # 9-bit blocks
    ("000010100", "Algeria", (
        ("000010100100", "Algeria Military"),
    )),
    ("010001000", "Austria", (
        ("0100010001", "Austria Military"),
    )),
    ("010001001", "Belgium", (
        ("010001001111", "Belgium Military"),
        ("010001001100000111100001", "Belgium Military"),
        ("010001001100000111100101", "Belgium Military"),
        ("010001001100000111100111", "Belgium Military"),
        ("010001001100000111101000", "Belgium Military"),
        ("010001001100000111100011", "Belgium Military"),
        ("010001001100000111100100", "Belgium Military"),
        ("010001001110110110000001", "Belgium Military"),
        ("010001001110110110000010", "Belgium Military"),
        ("010001001110110110000011", "Belgium Military"),
    )),
    ("010001010", "Bulgaria", (
        ("010001010111", "Bulgaria Military"),
    )),
    ("010010011", "Czech", (
        ("0100100110000100", "Czech Military"),
    )),
    ("011100100", "North Korea"),
    ("010001011", "Denmark", (
        ("0100010111110100", "Denmark Military"),
    )),
    ("000000010", "Egypt", (
        ("00000001000000000111", "Egypt Military"),
        ("00000001000000001000", "Egypt Military"),
        ("000000010000000100101100", "Egypt Military"),
    )),
    ("010001100", "Finland", (
        ("0100011001111000", "Finland Military"),
    )),
    ("010001101", "Greece", (
        ("01000110100000", "Greece Military"),
        ("01000110111101011001001", "Greece Military"),
        ("010001101010000010010001", "Greece Military"),
        ("010001101010000010010011", "Greece Military"),
        ("010001101010000010010101", "Greece Military"),
    )),
    ("010001110", "Hungary", (
        ("01000111001111", "Hungary Military"),
        ("01000111011111111111", "Hungary Military"),
    )),
    ("100010100", "Indonesia", (
        ("100010100010100100000001", "Indonesia Military"),
        ("100010100010100100000010", "Indonesia Military"),
        ("100010100000000000100100", "Indonesia Military"),
        ("100010100000000000101001", "Indonesia Military"),
    )),
    ("011100110", "Iran", (
        ("011100110100110100011110", "Iran Military"),
    )),
    ("011100101", "Iraq", (
        ("011100101000000111111", "Iraq Military"),
        ("0111001010000010000000", "Iraq Military"),
        ("01110010100000011111011", "Iraq Military"),
        ("011100101000000111110101", "Iraq Military"),
    )),
    ("011100111", "Israel", (
        ("0111001110001010", "Israel Military"),
    )),
    ("011101000", "Jordan"),
    ("011101001", "Lebanon"),
    ("000000011", "Libya", (
        ("000000011000001111101011", "Libya Military"),
    )),
    ("011101010", "Malaysia", (
        ("011101010000000101010110", "Malaysia Military"),
        ("011101010000000011010100", "Malaysia Military"),
        ("011101010000000000001100", "Malaysia Military"),
        ("011101010000000000001111", "Malaysia Military"),
        ("011101010000000000100100", "Malaysia Military"),
        ("011101010000000000100101", "Malaysia Military"),
        ("011101010000000000100110", "Malaysia Military"),
        ("011101010000000000100111", "Malaysia Military"),
        ("011101010000000010111101", "Malaysia Military"),
        ("011101010000000011000101", "Malaysia Military"),
        ("011101010000000011010111", "Malaysia Military"),
    )),
    ("000011010", "Mexico", (
        ("000011010000011000010101", "Mexico Military"),
        ("000011010000010011000010", "Mexico Military"),
        ("000011010000000110111010", "Mexico Military"),
        ("000011010000010101000110", "Mexico Military"),
        ("000011010000010101000111", "Mexico Military"),
        ("000011010000000000011011", "Mexico Military"),
        ("000011010000000000111111", "Mexico Military"),
        ("000011010000001010111001", "Mexico Military"),
        ("000011010000000001000101", "Mexico Military"),
        ("000011010000000001011010", "Mexico Military"),
        ("000011010000011001001111", "Mexico Military"),
        ("000011010000011001001101", "Mexico Military"),
    )),
    ("000000100", "Morocco", (
        ("00000010000000001011", "Morocco Military"),
        ("000000100000000011000", "Morocco Military"),
        ("000000100000000001011101", "Morocco Military"),
        ("000000100000000001011110", "Morocco Military"),
        ("000000100000000010101000", "Morocco Military"),
        ("000000100000000010101011", "Morocco Military"),
        ("000000100000000010100000", "Morocco Military"),
        ("000000100000000010100011", "Morocco Military"),
        ("000000100000000010100010", "Morocco Military"),
        ("000000100000000010100101", "Morocco Military"),
        ("000000100000000010101100", "Morocco Military"),
        ("000000100000000001001011", "Morocco Military"),
        ("000000100000000001000110", "Morocco Military"),
        ("000000100000000001001100", "Morocco Military"),
        ("000000100000000001001101", "Morocco Military"),
        ("000000100000000001001110", "Morocco Military"),
        ("000000100000000000110001", "Morocco Military"),
        ("000000100000000000110111", "Morocco Military"),
        ("000000100000000000111000", "Morocco Military"),
        ("000000100000000000111001", "Morocco Military"),
        ("000000100000000000111010", "Morocco Military"),
        ("000000100000000000111011", "Morocco Military"),
        ("000000100000000000111100", "Morocco Military"),
        ("000000100000000000111110", "Morocco Military"),
        ("000000100000000001000001", "Morocco Military"),
        ("000000100000000011001001", "Morocco Military"),
        ("000000100000000011001100", "Morocco Military"),
    )),
    ("010010000", "Netherlands", (
        ("010010000000", "Netherlands Military"),
        ("010010000100000010010101", "Netherlands Military"),
        ("010010000100000010010110", "Netherlands Military"),
        ("010010000100000010001001", "Netherlands Military"),
        ("010010000100000100001111", "Netherlands Military"),
        ("010010000100000100010001", "Netherlands Military"),
        ("010010000100000100010010", "Netherlands Military"),
        ("010010000100000010001011", "Netherlands Military"),
        ("010010000100000010000000", "Netherlands Military"),
        ("010010000100000010000001", "Netherlands Military"),
        ("010010000100000010000010", "Netherlands Military"),
        ("010010000100000010100100", "Netherlands Military"),
        ("010010000100000010100101", "Netherlands Military"),
        ("010010000100", "Aruba"),
    )),
    ("110010000", "New Zealand", (
        ("1100100001111111", "New Zealand Military"),
        ("110010000010010100011100", "New Zealand Military"),
        ("110010000010010100011101", "New Zealand Military"),
    )),
    ("010001111", "Norway", (
        ("0100011110000001", "Norway Military"),
        ("0100011110000000111", "Norway Military"),
        ("01000111100000001101", "Norway Military"),
        ("010001111000000011001", "Norway Military"),
        ("01000111100000001100011", "Norway Military"),
    )),
    ("011101100", "Pakistan", (
        ("011101100000000011101001", "Pakistan Military"),
        ("011101100000000000011001", "Pakistan Military"),
        ("011101100001000000110000", "Pakistan Military"),
        ("011101100001000011010110", "Pakistan Military"),
        ("011101100001000011011000", "Pakistan Military"),
        ("011101100001000000111111", "Pakistan Military"),
        ("011101100001000001001011", "Pakistan Military"),
        ("011101100001000001010001", "Pakistan Military"),
        ("011101100001000001010010", "Pakistan Military"),
        ("011101100001000001010100", "Pakistan Military"),
        ("011101100001000001011101", "Pakistan Military"),
        ("011101100011100110000111", "Pakistan Military"),
        ("011101100010101011110011", "Pakistan Military"),
        ("011101100010101111110100", "Pakistan Military"),
        ("011101100000001011110101", "Pakistan Military"),
        ("011101100010000010011010", "Pakistan Military"),
    )),
    ("011101011", "Philipines"),
    ("010010001", "Poland", (
        ("0100100011011000", "Poland Military"),
        ("010010001000000110001110", "Poland Military"),
    )),
    ("010010010", "Portugal", (
        ("0100100101111100", "Portugal Military"),
    )),
    ("011100011", "South Korea", (
        ("011100011111101100000001", "South Korea Military"),
        ("011100011111101100000010", "South Korea Military"),
        ("011100011111100100001010", "South Korea Military"),
        ("011100011111100100000110", "South Korea Military"),
    )),
    ("010010100", "Romania", (
        ("010010100011010110101010", "Romania Military"),
        ("010010100011010110101011", "Romania Military"),
        ("010010100011010110101100", "Romania Military"),
        ("010010100001011100101010", "Romania Military"),
        ("010010100001100000010110", "Romania Military"),
        ("010010100001100000101111", "Romania Military"),
    )),
    ("011100010", "Saudi Arabia", (
        ("0111000100000010011", "Saudi Arabia Military"),
        ("0111000100000010100", "Saudi Arabia Military"),
        ("0111000100000011100", "Saudi Arabia Military"),
        ("011100010000001001011", "Saudi Arabia Military"),
        ("011100010000000100001010", "Saudi Arabia Military"),
        ("011100010000000100001011", "Saudi Arabia Military"),
        ("011100010000001011100001", "Saudi Arabia Military"),
        ("011100010000001011100010", "Saudi Arabia Military"),
        ("011100010000001011010101", "Saudi Arabia Military"),
        ("011100010000001011100011", "Saudi Arabia Military"),
        ("011100010000001011100100", "Saudi Arabia Military"),
        ("011100010000001011111001", "Saudi Arabia Military"),
        ("011100010000001001011010", "Saudi Arabia Military"),
        ("011100010000001001011011", "Saudi Arabia Military"),
        ("011100010000001001011100", "Saudi Arabia Military"),
        ("011100010000001001011110", "Saudi Arabia Military"),
        ("011100010000001001011101", "Saudi Arabia Military"),
    )),
    ("011101101", "Singapore", (
        ("011101101110001100000011", "Singapore Military"),
        ("011101101110001100000010", "Singapore Military"),
        ("011101101110001100000100", "Singapore Military"),
        ("011101101110001100000001", "Singapore Military"),
        ("011101101000010011000011", "Singapore Military"),
    )),
    ("000000001", "South Africa"),
    ("011101110", "Sri Lanka"),
    ("010010101", "Sweden", (
        ("010010101000000110000001", "Sweden Military"),
        ("010010101000000110000010", "Sweden Military"),
        ("010010101000000110000011", "Sweden Military"),
        ("010010101000000110000100", "Sweden Military"),
        ("010010101000000110000101", "Sweden Military"),
        ("010010101000000110000110", "Sweden Military"),
        ("010010101000000110000111", "Sweden Military"),
        ("010010101000000110001000", "Sweden Military"),
        ("010010101000000111100110", "Sweden Military"),
        ("010010101000000100010100", "Sweden Military"),
        ("010010101000001000011111", "Sweden Military"),
        ("010010101000000111110010", "Sweden Military"),
        ("010010101000001000000111", "Sweden Military"),
        ("010010101000000111110011", "Sweden Military"),
        ("010010101000000111110100", "Sweden Military"),
        ("010010101000000111110101", "Sweden Military"),
        ("010010101000000011010000", "Sweden Military"),
        ("010010101000000111111001", "Sweden Military"),
        ("010010101000000111111000", "Sweden Military"),
        ("010010101000000110011001", "Sweden Military"),
        ("010010101000001000101010", "Sweden Military"),
    )),
    ("010010110", "Switzerland", (
        ("010010110111", "Switzerland Military"),
    )),
    ("011101111", "Syria"),
    ("100010000", "Thailand", (
        ("100010000101001100110011", "Thailand Military"),
        ("100010000010001001001000", "Thailand Military"),
        ("100010000000010110100011", "Thailand Military"),
        ("100010000000010110110000", "Thailand Military"),
        ("100010000000010000000001", "Thailand Military"),
        ("100010000011101011000001", "Thailand Military"),
        ("100010000000000000100111", "Thailand Military"),
        ("100010000000000000101100", "Thailand Military"),
        ("100010000000010110100111", "Thailand Military"),
        ("100010000000010110101000", "Thailand Military"),
        ("100010000000010110101001", "Thailand Military"),
        ("100010000000010110101010", "Thailand Military"),
        ("100010000000010110101011", "Thailand Military"),
        ("100010000000010110101100", "Thailand Military"),
        ("100010000000010110101101", "Thailand Military"),
        ("100010000000010110101110", "Thailand Military"),
        ("100010000000010110101111", "Thailand Military"),
        ("100010000000000001001001", "Thailand Military"),
        ("100010000101001100110010", "Thailand Military"),
        ("100010000001110001100001", "Thailand Military"),
        ("100010000001110001100010", "Thailand Military"),
        ("100010000001110001100011", "Thailand Military"),
        ("100010000001110001100100", "Thailand Military"),
        ("100010000000110110110110", "Thailand Military"),
    )),
    ("000000101", "Tunisia"),
    ("010010111", "Turkey", (
        ("0100101110000010", "Turkey Military"),
    )),
    ("010100001", "Ukraine"),
    ("000011011", "Venezuela", (
        ("000011011000000000110010", "Venezuela Military"),
        ("000011011000000001100000", "Venezuela Military"),
        ("000011011000000001101100", "Venezuela Military"),
    )),
    ("100010001", "Viet Nam"),
    ("010011000", "Serbia", (
        ("010011000000000101010101", "Serbia Military"),
    )),
    ("111100000", "ICAO(1) Temp. Address"),

    # 12-bit blocks
    ("011100000000", "Afghanistan"),
    ("000010010000", "Angola"),
    ("000010101000", "Bahamas", (
        ("000010101000000000100001", "Bahamas Military"),
    )),
    ("100010010100", "Bahrain", (
        ("100010010100000000010001", "Bahrain Military"),
        ("100010010100000000010110", "Bahrain Military"),
    )),
    ("011100000010", "Bangladesh", (
        ("011100000010110000000010", "Bangladesh Military"),
        ("011100000010110000000011", "Bangladesh Military"),
        ("011100000010110000000100", "Bangladesh Military"),
    )),
    ("111010010100", "Bolivia", (
        ("111010010100000011111010", "Bolivia Military"),
        ("111010010100000100000100", "Bolivia Military"),
    )),
    ("000010011100", "Burkina Faso"),
    ("000000110010", "Burundi"),
    ("011100001110", "Cambodia"),
    ("000000110100", "Cameroon", (
        ("000000110100010001000011", "Cameroon Military"),
        ("000000110100010001000101", "Cameroon Military"),
    )),
    ("000001101100", "Central African Rep."),
    ("000010000100", "Chad"),
    ("111010000000", "Chile", (
        ("1110100000000110", "Chile Military"),
    )),
    ("000010101100", "Colombia", (
        ("000010101100000000000101", "Columbia Military"),
        ("000010101100000000111011", "Columbia Military"),
        ("000010101100000001100110", "Columbia Military"),
        ("000010101100000001100111", "Columbia Military"),
        ("000010101100000001110001", "Columbia Military"),
        ("000010101100000100001100", "Columbia Military"),
        ("000010101100000000110110", "Columbia Military"),
    )),
    ("000010001100", "Congo DRC"),
    ("000000110110", "Congo ROC"),
    ("000010101110", "Costa Rica"),
    ("000000111000", "Cote d Ivoire"),
    ("000010110000", "Cuba"),
    ("000011000100", "Dominican Republic"),
    ("111010000100", "Ecuador", (
        ("111010000100000000110101", "Ecuador Military"),
        ("111010000100000000110000", "Ecuador Military"),
    )),
    ("000010110010", "El Salvador"),
    ("000001000010", "Equatorial Guinea"),
    ("000001000000", "Ethiopia"),
    ("110010001000", "Fiji"),
    ("000000111110", "Gabon"),
    ("000010011010", "Gambia"),
    ("000001000100", "Ghana"),
    ("000010110100", "Guatemala"),
    ("000001000110", "Guinea"),
    ("000010110110", "Guyana"),
    ("000010111000", "Haiti"),
    ("000010111010", "Honduras"),
    ("010011001100", "Iceland"),
    ("010011001010", "Ireland", (
        ("010011001010000000100011", "Ireland Military"),
        ("010011001010000100111110", "Ireland Military"),
        ("010011001010000100111111", "Ireland Military"),
        ("010011001010000101011000", "Ireland Military"),
        ("010011001010001000000100", "Ireland Military"),
        ("010011001010000111100111", "Ireland Military"),
        ("010011001010000111101000", "Ireland Military"),
        ("010011001010000111101001", "Ireland Military"),
        ("010011001010000111101010", "Ireland Military"),
        ("010011001010000111101011", "Ireland Military"),
        ("010011001010000111101100", "Ireland Military"),
        ("010011001010000111101101", "Ireland Military"),
        ("010011001010000111101110", "Ireland Military"),
        ("010011001010001010001100", "Ireland Military"),
        ("010011001010001010001011", "Ireland Military"),
        ("010011001010001100011010", "Ireland Military"),
        ("010011001010001100011110", "Ireland Military"),
        ("010011001010001100110000", "Ireland Military"),
        ("010011001010001100110001", "Ireland Military"),
        ("010011001010001100110010", "Ireland Military"),
        ("010011001010001100110101", "Ireland Military"),
        ("010011001010001100110110", "Ireland Military"),
    )),
    ("000010111110", "Jamaica"),
    ("000001001100", "Kenya"),
    ("011100000110", "Kuwait"),
    ("011100001000", "Laos"),
    ("000001010000", "Liberia"),
    ("000001010100", "Madagascar"),
    ("000001011000", "Malawi"),
    ("000001011100", "Mali"),
    ("000000000110", "Mozambique"),
    ("011100000100", "Myanmar"),
    ("011100001010", "Nepal"),
    ("000011000000", "Nicaragua"),
    ("000001100010", "Niger"),
    ("000001100100", "Nigeria", (
        ("000001100100000001010001", "Nigeria Military"),
        ("000001100100000011110000", "Nigeria Military"),
    )),
    ("000011000010", "Panama", (
        ("000011000010000001001110", "Panama Military"),
    )),
    ("100010011000", "Papua New Guinea"),
    ("111010001000", "Paraguay"),
    ("111010001100", "Peru", (
        ("111010001100000000000111", "Peru Military"),
    )),
    ("000001101110", "Rwanda"),
    ("000001110000", "Senegal"),
    ("000001111000", "Somalia"),
    ("000001111100", "Sudan"),
    ("000011001000", "Suriname"),
    ("000010001000", "Togo"),
    ("000011000110", "Trinidad and Tobago"),
    ("000001101000", "Uganda"),
    ("100010010110", "United Arab Emirates", (
        ("100010010110110000", "United Arab Emirates Military"),
        ("100010010110000100100110", "United Arab Emirates Military"),
        ("100010010110000000101001", "United Arab Emirates Military"),
        ("100010010110000000101010", "United Arab Emirates Military"),
        ("100010010110000000101011", "United Arab Emirates Military"),
        ("100010010110000000101110", "United Arab Emirates Military"),
        ("100010010110000000101100", "United Arab Emirates Military"),
    )),
    ("000010000000", "Tanzania"),
    ("111010010000", "Uruguay"),
    ("100010010000", "Yemen"),
    ("000010001010", "Zambia"),

    # 14-bit blocks
    ("01010000000100", "Albania"),
    ("00001100101000", "Antigua and Barbuda"),
    ("01100000000000", "Armenia"),
    ("01100000000010", "Azerbaijan", (
        ("011000000000100000000001", "Azerbaijan Military"),
    )),
    ("00001010101000", "Barbados"),
    ("01010001000000", "Belarus"),
    ("00001010101100", "Belize"),
    ("00001001010000", "Benin"),
    ("01101000000000", "Bhutan"),
    ("01010001001100", "Bosnia and Herzegovina"),
    ("00000011000000", "Botswana", (
        ("000000110000000000010010", "Botswana Military"),
        ("000000110000000000011010", "Botswana Military"),
    )),
    ("10001001010100", "Brunei Darussalam"),
    ("00001001011000", "Cape Verde"),
    ("00000011010100", "Comoros"),
    ("10010000000100", "Cook Islands"),
    ("01010000000111", "Croatia", (
        ("010100000001110100010011", "Croatia Military"),
        ("010100000001111110000101", "Croatia Military"),
        ("010100000001111110000110", "Croatia Military"),
    )),
    ("01001100100000", "Cyprus"),
    ("00001001100000", "Djibouti"),
    ("00100000001000", "Eritrea"),
    ("01010001000100", "Estonia"),
    ("01010001010000", "Georgia"),
    ("00001100110000", "Grenada"),
    ("00000100100000", "Guinea-Bissau"),
    ("01101000001100", "Kazakhstan"),
    ("11001000111000", "Kiribati"),
    ("01100000000100", "Kyrgyzstan"),
    ("01010000001011", "Latvia"),
    ("00000100101000", "Lesotho"),
    ("01010000001111", "Lithuania", (
        ("010100000011111111010010", "Lithuania Military"),
        ("010100000011111111010011", "Lithuania Military"),
    )),
    ("01001101000000", "Luxembourg", (
        ("0100110100000011110", "NATO"),
    )),
    ("010001110111111111110001", "NATO Military"),
    ("010001110111111111110010", "NATO Military"),
    ("010001110111111111110011", "NATO Military"),
    ("00000101101000", "Maldives"),
    ("01001101001000", "Malta", (
        ("010011010010000001011000", "Malta Military"),
    )),
    ("10010000000000", "Marshall Islands"),
    ("00000101111000", "Mauritania"),
    ("00000110000000", "Mauritius"),
    ("01101000000100", "Micronesia"),
    ("01001101010000", "Monaco"),
    ("01101000001000", "Mongolia"),
    ("01010001011000", "Montenegro"),
    ("00100000000100", "Namibia"),
    ("11001000101000", "Nauru"),
    ("01110000110000", "Oman", (
        ("01110000110000000111", "Oman Military"),
        ("011100001100000010001100", "Oman Military"),
        ("011100001100000010001011", "Oman Military"),
    )),
    ("01101000010000", "Palau"),
    ("00000110101000", "Qatar", (
        ("000001101010001001001010", "Qatar Military"),
        ("000001101010001001001011", "Qatar Military"),
        ("000001101010001001001100", "Qatar Military"),
        ("000001101010001001001101", "Qatar Military"),
        ("000001101010000011011001", "Qatar Military"),
        ("000001101010000011011010", "Qatar Military"),
        ("000001101010001001001000", "Qatar Military"),
        ("000001101010001001001001", "Qatar Military"),
        ("000001101010001001010101", "Qatar Military"),
        ("000001101010001001010110", "Qatar Military"),
    )),
    ("01010000010011", "Moldova"),
    ("11001000110000", "Saint Lucia"),
    ("00001011110000", "Saint Vincent and the Grenadines"),
    ("10010000001000", "Samoa"),
    ("01010000000000", "San Marino"),
    ("00001001111000", "Sao Tome and Principe"),
    ("00000111010000", "Seychelles"),
    ("00000111011000", "Sierra Leone"),
    ("01010000010111", "Slovakia", (
        ("010100000101111101101100", "Slovakia Military"),
        ("010100000101111101100011", "Slovakia Military"),
        ("010100000101111101100001", "Slovakia Military"),
        ("010100000101111101100010", "Slovakia Military"),
        ("010100000101111101101010", "Slovakia Military"),
        ("010100000101111101101000", "Slovakia Military"),
    )),
    ("01010000011011", "Slovenia", (
        ("0101000001101111", "Slovenia Military"),
    )),
    ("10001001011100", "Solomon Islands"),
    ("00000111101000", "Swaziland"),
    ("01010001010100", "Tajikistan"),
    ("01010001001000", "Macedonia"),
    ("11001000110100", "Tonga"),
    ("01100000000110", "Turkmenistan", (
        ("011000000001100001100010", "Turkmenistan Military"),
    )),
    ("01010000011111", "Uzbekistan"),
    ("11001001000000", "Vanuatu"),
    ("00000000010000", "Zimbabwe"),
    ("10001001100100", "Taiwan", (
        ("100010011001000101100000", "Taiwan Military"),
    )),
    # Shadowed by Taiwan above; kept to mirror the allocation chart
    ("10001001100100", "ICAO(2) Flight Safety"),
    ("11110000100100", "ICAO(2) Flight Safety"),
)

REGIONAL_RULES = (
    ("00100", "Africa Region"),
    ("00101", "South America Region"),
    ("0101", "Europe/North Atlantic Regions"),
    ("01100", "Middle East Region"),
    ("01101", "Asia Region"),
    ("1001", "North America/Pacific Regions"),
    ("111011", "Carribean Region"),
    ("1011", "Country Code RESERVED"),
    ("1101", "Country Code RESERVED"),
    ("1111", "Country Code RESERVED"),
    ("000000000000000000000000", "Country Code DISALLOWED"),
    ("111111111111111111111111", "Country Code DISALLOWED"),
)
