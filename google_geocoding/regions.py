"""
Region catalog for the Google Geocoding API.

Regions are biased by country code top-level domain, see
https://icannwiki.org/Country_code_top-level_domain
"""

from enum import StrEnum


class Region(StrEnum):
    """Country code top-level domain used for region biasing"""

    ASCENSION_ISLAND = ".ac"
    ANDORRA = ".ad"
    UNITED_ARAB_EMIRATES = ".ae"
    AFGHANISTAN = ".af"
    ANTIGUA_AND_BARBUDA = ".ag"
    ANGUILLA = ".ai"
    ALBANIA = ".al"
    ARMENIA = ".am"
    ANTILLES_NETHERLANDS = ".an"
    ANGOLA = ".ao"
    ANTARCTICA = ".aq"
    ARGENTINA = ".ar"
    AMERICAN_SAMOA = ".as"
    AUSTRIA = ".at"
    AUSTRALIA = ".au"
    ARUBA = ".aw"
    ALAND_ISLANDS = ".ax"
    AZERBAIJAN = ".az"
    BOSNIA_AND_HERZEGOVINA = ".ba"
    BARBADOS = ".bb"
    BANGLADESH = ".bd"
    BELGIUM = ".be"
    BURKINA_FASO = ".bf"
    BULGARIA = ".bg"
    BAHRAIN = ".bh"
    BURUNDI = ".bi"
    BENIN = ".bj"
    SAINT_BARTHELEMY = ".bl"
    BERMUDA = ".bm"
    BRUNEI_DARUSSALAM = ".bn"
    BOLIVIA = ".bo"
    BONAIRE_SINT_EUSTATIUS_AND_SABA = ".bq"
    BRAZIL = ".br"
    BAHAMAS = ".bs"
    BHUTAN = ".bt"
    BOUVET_ISLAND = ".bv"
    BOTSWANA = ".bw"
    BELARUS = ".by"
    BELIZE = ".bz"
    CANADA = ".ca"
    COCOS_ISLANDS = ".cc"
    DEMOCRATIC_REPUBLIC_OF_THE_CONGO = ".cd"
    CENTRAL_AFRICAN_REPUBLIC = ".cf"
    REPUBLIC_OF_CONGO = ".cg"
    SWITZERLAND = ".ch"
    COTE_DIVOIRE = ".ci"
    COOK_ISLANDS = ".ck"
    CHILE = ".cl"
    CAMEROON = ".cm"
    CHINA = ".cn"
    COLOMBIA = ".co"
    COSTA_RICA = ".cr"
    CUBA = ".cu"
    CAPE_VERDE = ".cv"
    CURACAO = ".cw"
    CHRISTMAS_ISLAND = ".cx"
    CYPRUS = ".cy"
    CZECH_REPUBLIC = ".cz"
    GERMANY = ".de"
    DJIBOUTI = ".dj"
    DENMARK = ".dk"
    DOMINICA = ".dm"
    DOMINICAN_REPUBLIC = ".do"
    ALGERIA = ".dz"
    ECUADOR = ".ec"
    ESTONIA = ".ee"
    EGYPT = ".eg"
    WESTERN_SAHARA = ".eh"
    ERITREA = ".er"
    SPAIN = ".es"
    ETHIOPIA = ".et"
    EUROPEAN_UNION = ".eu"
    FINLAND = ".fi"
    FIJI = ".fj"
    FALKLAND_ISLANDS = ".fk"
    FEDERATED_STATES_OF_MICRONESIA = ".fm"
    FAROE_ISLANDS = ".fo"
    FRANCE = ".fr"
    GABON = ".ga"
    GRENADA = ".gd"
    GEORGIA = ".ge"
    FRENCH_GUIANA = ".gf"
    GUERNSEY = ".gg"
    GHANA = ".gh"
    GIBRALTAR = ".gi"
    GREENLAND = ".gl"
    GAMBIA = ".gm"
    GUINEA = ".gn"
    GUADELOUPE = ".gp"
    EQUATORIAL_GUINEA = ".gq"
    GREECE = ".gr"
    SOUTH_GEORGIA_AND_THE_SOUTH_SANDWICH_ISLANDS = ".gs"
    GUATEMALA = ".gt"
    GUAM = ".gu"
    GUINEA_BISSAU = ".gw"
    GUYANA = ".gy"
    HONG_KONG = ".hk"
    HEARD_ISLAND_AND_MCDONALD_ISLANDS = ".hm"
    HONDURAS = ".hn"
    CROATIA = ".hr"
    HAITI = ".ht"
    HUNGARY = ".hu"
    INDONESIA = ".id"
    IRELAND = ".ie"
    ISRAEL = ".il"
    ISLE_OF_MAN = ".im"
    INDIA = ".in"
    BRITISH_INDIAN_OCEAN_TERRITORY = ".io"
    IRAQ = ".iq"
    ISLAMIC_REPUBLIC_OF_IRAN = ".ir"
    ICELAND = ".is"
    ITALY = ".it"
    JERSEY = ".je"
    JAMAICA = ".jm"
    JORDAN = ".jo"
    JAPAN = ".jp"
    KENYA = ".ke"
    KYRGYZSTAN = ".kg"
    CAMBODIA = ".kh"
    KIRIBATI = ".ki"
    COMOROS = ".km"
    SAINT_KITTS_AND_NEVIS = ".kn"
    DEMOCRATIC_PEOPLES_REPUBLIC_OF_KOREA = ".kp"
    REPUBLIC_OF_KOREA = ".kr"
    KUWAIT = ".kw"
    CAYMAN_ISLANDS = ".ky"
    KAZAKHSTAN = ".kz"
    LAOS = ".la"
    LEBANON = ".lb"
    SAINT_LUCIA = ".lc"
    LIECHTENSTEIN = ".li"
    SRI_LANKA = ".lk"
    LIBERIA = ".lr"
    LESOTHO = ".ls"
    LITHUANIA = ".lt"
    LUXEMBOURG = ".lu"
    LATVIA = ".lv"
    LIBYA = ".ly"
    MOROCCO = ".ma"
    MONACO = ".mc"
    REPUBLIC_OF_MOLDOVA = ".md"
    MONTENEGRO = ".me"
    SAINT_MARTIN = ".mf"
    MADAGASCAR = ".mg"
    MARSHALL_ISLANDS = ".mh"
    MACEDONIA = ".mk"
    MALI = ".ml"
    MYANMAR = ".mm"
    MONGOLIA = ".mn"
    MACAO = ".mo"
    NORTHERN_MARIANA_ISLANDS = ".mp"
    MARTINIQUE = ".mq"
    MAURITANIA = ".mr"
    MONTSERRAT = ".ms"
    MALTA = ".mt"
    MAURITIUS = ".mu"
    MALDIVES = ".mv"
    MALAWI = ".mw"
    MEXICO = ".mx"
    MALAYSIA = ".my"
    MOZAMBIQUE = ".mz"
    NAMIBIA = ".na"
    NEW_CALEDONIA = ".nc"
    NIGER = ".ne"
    NORFOLK_ISLAND = ".nf"
    NIGERIA = ".ng"
    NICARAGUA = ".ni"
    NETHERLANDS = ".nl"
    NORWAY = ".no"
    NEPAL = ".np"
    NAURU = ".nr"
    NIUE = ".nu"
    NEW_ZEALAND = ".nz"
    OMAN = ".om"
    PANAMA = ".pa"
    PERU = ".pe"
    FRENCH_POLYNESIA = ".pf"
    PAPUA_NEW_GUINEA = ".pg"
    PHILIPPINES = ".ph"
    PAKISTAN = ".pk"
    POLAND = ".pl"
    SAINT_PIERRE_AND_MIQUELON = ".pm"
    PITCAIRN = ".pn"
    PUERTO_RICO = ".pr"
    PALESTINE = ".ps"
    PORTUGAL = ".pt"
    PALAU = ".pw"
    PARAGUAY = ".py"
    QATAR = ".qa"
    REUNION = ".re"
    ROMANIA = ".ro"
    SERBIA = ".rs"
    RUSSIA = ".ru"
    RWANDA = ".rw"
    SAUDI_ARABIA = ".sa"
    SOLOMON_ISLANDS = ".sb"
    SEYCHELLES = ".sc"
    SUDAN = ".sd"
    SWEDEN = ".se"
    SINGAPORE = ".sg"
    SAINT_HELENA = ".sh"
    SLOVENIA = ".si"
    SVALBARD_AND_JAN_MAYEN = ".sj"
    SLOVAKIA = ".sk"
    SIERRA_LEONE = ".sl"
    SAN_MARINO = ".sm"
    SENEGAL = ".sn"
    SOMALIA = ".so"
    SURINAME = ".sr"
    SOUTH_SUDAN = ".ss"
    SAO_TOME_AND_PRINCIPE = ".st"
    SOVIET_UNION = ".su"
    EL_SALVADOR = ".sv"
    SINT_MAARTEN = ".sx"
    SYRIA = ".sy"
    SWAZILAND = ".sz"
    TURKS_AND_CAICOS_ISLANDS = ".tc"
    CHAD = ".td"
    FRENCH_SOUTHERN_TERRITORIES = ".tf"
    TOGO = ".tg"
    THAILAND = ".th"
    TAJIKISTAN = ".tj"
    TOKELAU = ".tk"
    TIMOR_LESTE = ".tl"
    TURKMENISTAN = ".tm"
    TUNISIA = ".tn"
    TONGA = ".to"
    PORTUGUESE_TIMOR = ".tp"
    TURKEY = ".tr"
    TRINIDAD_AND_TOBAGO = ".tt"
    TUVALU = ".tv"
    TAIWAN = ".tw"
    TANZANIA = ".tz"
    UKRAINE = ".ua"
    UGANDA = ".ug"
    UNITED_KINGDOM = ".uk"
    UNITED_STATES_MINOR_OUTLYING_ISLANDS = ".um"
    UNITED_STATES = ".us"
    URUGUAY = ".uy"
    UZBEKISTAN = ".uz"
    VATICAN_CITY = ".va"
    SAINT_VINCENT_AND_THE_GRENADINES = ".vc"
    VENEZUELA = ".ve"
    BRITISH_VIRGIN_ISLANDS = ".vg"
    US_VIRGIN_ISLANDS = ".vi"
    VIETNAM = ".vn"
    VANUATU = ".vu"
    WALLIS_AND_FUTUNA = ".wf"
    SAMOA = ".ws"
    MAYOTTE = ".yt"
    SOUTH_AFRICA = ".za"
    ZAMBIA = ".zm"
    ZIMBABWE = ".zw"
