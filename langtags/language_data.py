"""
langtags/language_data.py

Tabla estática ISO 639-1 / ISO 639-2 usada por `langtags.languages`.

Cada fila: (iso3, iso3_bibliographic, iso2, name)

- iso3 es el código canónico de tres letras que usamos en tags y whitelist.
- iso3_bibliographic es la variante alternativa (B/T) cuando existe.
- Los códigos especiales (und/mul/zxx/mis) van al final.
"""

from __future__ import annotations

from typing import Final

LANGUAGE_ROWS: Final[tuple[tuple[str, str | None, str | None, str], ...]] = (
    ("aar", None, "aa", "Afar"),
    ("abk", None, "ab", "Abkhazian"),
    ("ace", None, None, "Achinese"),
    ("ach", None, None, "Acoli"),
    ("ada", None, None, "Adangme"),
    ("ady", None, None, "Adyghe"),
    ("afr", None, "af", "Afrikaans"),
    ("ain", None, None, "Ainu"),
    ("aka", None, "ak", "Akan"),
    ("alb", "sqi", "sq", "Albanian"),
    ("ale", None, None, "Aleut"),
    ("alt", None, None, "Southern Altai"),
    ("amh", None, "am", "Amharic"),
    ("anp", None, None, "Angika"),
    ("ara", None, "ar", "Arabic"),
    ("arg", None, "an", "Aragonese"),
    ("arm", "hye", "hy", "Armenian"),
    ("arn", None, None, "Mapudungun"),
    ("arp", None, None, "Arapaho"),
    ("arw", None, None, "Arawak"),
    ("asm", None, "as", "Assamese"),
    ("ast", None, None, "Asturian"),
    ("ava", None, "av", "Avaric"),
    ("awa", None, None, "Awadhi"),
    ("aym", None, "ay", "Aymara"),
    ("aze", None, "az", "Azerbaijani"),
    ("bak", None, "ba", "Bashkir"),
    ("bal", None, None, "Baluchi"),
    ("bam", None, "bm", "Bambara"),
    ("ban", None, None, "Balinese"),
    ("baq", "eus", "eu", "Basque"),
    ("bas", None, None, "Basa"),
    ("bej", None, None, "Beja"),
    ("bel", None, "be", "Belarusian"),
    ("bem", None, None, "Bemba"),
    ("ben", None, "bn", "Bengali"),
    ("bho", None, None, "Bhojpuri"),
    ("bik", None, None, "Bikol"),
    ("bin", None, None, "Bini"),
    ("bis", None, "bi", "Bislama"),
    ("bla", None, None, "Siksika"),
    ("bod", "tib", "bo", "Tibetan"),
    ("bos", None, "bs", "Bosnian"),
    ("bra", None, None, "Braj"),
    ("bre", None, "br", "Breton"),
    ("bua", None, None, "Buriat"),
    ("bug", None, None, "Buginese"),
    ("bul", None, "bg", "Bulgarian"),
    ("bur", "mya", "my", "Burmese"),
    ("byn", None, None, "Blin"),
    ("cad", None, None, "Caddo"),
    ("car", None, None, "Galibi Carib"),
    ("cat", None, "ca", "Catalan"),
    ("ceb", None, None, "Cebuano"),
    ("ces", "cze", "cs", "Czech"),
    ("cha", None, "ch", "Chamorro"),
    ("che", None, "ce", "Chechen"),
    ("chi", "zho", "zh", "Chinese"),
    ("chk", None, None, "Chuukese"),
    ("chm", None, None, "Mari"),
    ("chn", None, None, "Chinook jargon"),
    ("cho", None, None, "Choctaw"),
    ("chp", None, None, "Chipewyan"),
    ("chr", None, None, "Cherokee"),
    ("chv", None, "cv", "Chuvash"),
    ("chy", None, None, "Cheyenne"),
    ("cnr", None, None, "Montenegrin"),
    ("cor", None, "kw", "Cornish"),
    ("cos", None, "co", "Corsican"),
    ("cre", None, "cr", "Cree"),
    ("crh", None, None, "Crimean Tatar"),
    ("csb", None, None, "Kashubian"),
    ("cym", "wel", "cy", "Welsh"),
    ("dak", None, None, "Dakota"),
    ("dan", None, "da", "Danish"),
    ("dar", None, None, "Dargwa"),
    ("del", None, None, "Delaware"),
    ("den", None, None, "Slave (Athapascan)"),
    ("dgr", None, None, "Dogrib"),
    ("din", None, None, "Dinka"),
    ("div", None, "dv", "Divehi"),
    ("doi", None, None, "Dogri"),
    ("dsb", None, None, "Lower Sorbian"),
    ("dua", None, None, "Duala"),
    ("dut", "nld", "nl", "Dutch"),
    ("dyu", None, None, "Dyula"),
    ("dzo", None, "dz", "Dzongkha"),
    ("efi", None, None, "Efik"),
    ("eka", None, None, "Ekajuk"),
    ("ell", "gre", "el", "Greek Modern"),
    ("eng", None, "en", "English"),
    ("est", None, "et", "Estonian"),
    ("ewe", None, "ee", "Ewe"),
    ("ewo", None, None, "Ewondo"),
    ("fan", None, None, "Fang"),
    ("fao", None, "fo", "Faroese"),
    ("fas", "per", "fa", "Persian"),
    ("fat", None, None, "Fanti"),
    ("fij", None, "fj", "Fijian"),
    ("fil", None, None, "Filipino"),
    ("fin", None, "fi", "Finnish"),
    ("fon", None, None, "Fon"),
    ("fre", "fra", "fr", "French"),
    ("frr", None, None, "Northern Frisian"),
    ("frs", None, None, "East Frisian Low Saxon"),
    ("fry", None, "fy", "Western Frisian"),
    ("ful", None, "ff", "Fulah"),
    ("fur", None, None, "Friulian"),
    ("gaa", None, None, "Ga"),
    ("gay", None, None, "Gayo"),
    ("gba", None, None, "Gbaya"),
    ("geo", "kat", "ka", "Georgian"),
    ("ger", "deu", "de", "German"),
    ("gil", None, None, "Gilbertese"),
    ("gla", None, "gd", "Gaelic"),
    ("gle", None, "ga", "Irish"),
    ("glg", None, "gl", "Galician"),
    ("glv", None, "gv", "Manx"),
    ("gon", None, None, "Gondi"),
    ("gor", None, None, "Gorontalo"),
    ("grb", None, None, "Grebo"),
    ("grn", None, "gn", "Guarani"),
    ("gsw", None, None, "Swiss German"),
    ("guj", None, "gu", "Gujarati"),
    ("gwi", None, None, "Gwich'in"),
    ("hai", None, None, "Haida"),
    ("hat", None, "ht", "Haitian"),
    ("hau", None, "ha", "Hausa"),
    ("haw", None, None, "Hawaiian"),
    ("heb", None, "he", "Hebrew"),
    ("her", None, "hz", "Herero"),
    ("hil", None, None, "Hiligaynon"),
    ("hin", None, "hi", "Hindi"),
    ("hmn", None, None, "Hmong"),
    ("hmo", None, "ho", "Hiri Motu"),
    ("hrv", None, "hr", "Croatian"),
    ("hsb", None, None, "Upper Sorbian"),
    ("hun", None, "hu", "Hungarian"),
    ("hup", None, None, "Hupa"),
    ("iba", None, None, "Iban"),
    ("ibo", None, "ig", "Igbo"),
    ("iii", None, "ii", "Sichuan Yi"),
    ("iku", None, "iu", "Inuktitut"),
    ("ilo", None, None, "Iloko"),
    ("ind", None, "id", "Indonesian"),
    ("inh", None, None, "Ingush"),
    ("ipk", None, "ik", "Inupiaq"),
    ("isl", "ice", "is", "Icelandic"),
    ("ita", None, "it", "Italian"),
    ("jav", None, "jv", "Javanese"),
    ("jpn", None, "ja", "Japanese"),
    ("jpr", None, None, "Judeo-Persian"),
    ("jrb", None, None, "Judeo-Arabic"),
    ("kaa", None, None, "Kara-Kalpak"),
    ("kab", None, None, "Kabyle"),
    ("kac", None, None, "Kachin"),
    ("kal", None, "kl", "Kalaallisut"),
    ("kam", None, None, "Kamba"),
    ("kan", None, "kn", "Kannada"),
    ("kas", None, "ks", "Kashmiri"),
    ("kau", None, "kr", "Kanuri"),
    ("kaz", None, "kk", "Kazakh"),
    ("kbd", None, None, "Kabardian"),
    ("kha", None, None, "Khasi"),
    ("khm", None, "km", "Central Khmer"),
    ("kik", None, "ki", "Kikuyu"),
    ("kin", None, "rw", "Kinyarwanda"),
    ("kir", None, "ky", "Kirghiz"),
    ("kmb", None, None, "Kimbundu"),
    ("kok", None, None, "Konkani"),
    ("kom", None, "kv", "Komi"),
    ("kon", None, "kg", "Kongo"),
    ("kor", None, "ko", "Korean"),
    ("kos", None, None, "Kosraean"),
    ("kpe", None, None, "Kpelle"),
    ("krc", None, None, "Karachay-Balkar"),
    ("krl", None, None, "Karelian"),
    ("kru", None, None, "Kurukh"),
    ("kua", None, "kj", "Kuanyama"),
    ("kum", None, None, "Kumyk"),
    ("kur", None, "ku", "Kurdish"),
    ("kut", None, None, "Kutenai"),
    ("lad", None, None, "Ladino"),
    ("lah", None, None, "Lahnda"),
    ("lam", None, None, "Lamba"),
    ("lao", None, "lo", "Lao"),
    ("lav", None, "lv", "Latvian"),
    ("lez", None, None, "Lezghian"),
    ("lim", None, "li", "Limburgan"),
    ("lin", None, "ln", "Lingala"),
    ("lit", None, "lt", "Lithuanian"),
    ("lol", None, None, "Mongo"),
    ("loz", None, None, "Lozi"),
    ("ltz", None, "lb", "Luxembourgish"),
    ("lua", None, None, "Luba-Lulua"),
    ("lub", None, "lu", "Luba-Katanga"),
    ("lug", None, "lg", "Ganda"),
    ("lun", None, None, "Lunda"),
    ("luo", None, None, "Luo (Kenya and Tanzania)"),
    ("lus", None, None, "Lushai"),
    ("mac", "mkd", "mk", "Macedonian"),
    ("mad", None, None, "Madurese"),
    ("mag", None, None, "Magahi"),
    ("mah", None, "mh", "Marshallese"),
    ("mai", None, None, "Maithili"),
    ("mak", None, None, "Makasar"),
    ("mal", None, "ml", "Malayalam"),
    ("man", None, None, "Mandingo"),
    ("mao", "mri", "mi", "Maori"),
    ("mar", None, "mr", "Marathi"),
    ("mas", None, None, "Masai"),
    ("may", "msa", "ms", "Malay"),
    ("mdf", None, None, "Moksha"),
    ("mdr", None, None, "Mandar"),
    ("men", None, None, "Mende"),
    ("mic", None, None, "Mi'kmaq"),
    ("min", None, None, "Minangkabau"),
    ("mlg", None, "mg", "Malagasy"),
    ("mlt", None, "mt", "Maltese"),
    ("mnc", None, None, "Manchu"),
    ("mni", None, None, "Manipuri"),
    ("moh", None, None, "Mohawk"),
    ("mon", None, "mn", "Mongolian"),
    ("mos", None, None, "Mossi"),
    ("mwl", None, None, "Mirandese"),
    ("mwr", None, None, "Marwari"),
    ("myv", None, None, "Erzya"),
    ("nap", None, None, "Neapolitan"),
    ("nau", None, "na", "Nauru"),
    ("nav", None, "nv", "Navajo"),
    ("nbl", None, "nr", "Ndebele South"),
    ("nde", None, "nd", "Ndebele North"),
    ("ndo", None, "ng", "Ndonga"),
    ("nds", None, None, "Low German"),
    ("nep", None, "ne", "Nepali"),
    ("new", None, None, "Nepal Bhasa"),
    ("nia", None, None, "Nias"),
    ("niu", None, None, "Niuean"),
    ("nno", None, "nn", "Norwegian Nynorsk"),
    ("nob", None, "nb", "Bokmål Norwegian"),
    ("nog", None, None, "Nogai"),
    ("nor", None, "no", "Norwegian"),
    ("nqo", None, None, "N'Ko"),
    ("nso", None, None, "Pedi"),
    ("nya", None, "ny", "Chichewa"),
    ("nym", None, None, "Nyamwezi"),
    ("nyn", None, None, "Nyankole"),
    ("nyo", None, None, "Nyoro"),
    ("nzi", None, None, "Nzima"),
    ("oci", None, "oc", "Occitan"),
    ("oji", None, "oj", "Ojibwa"),
    ("ori", None, "or", "Oriya"),
    ("orm", None, "om", "Oromo"),
    ("osa", None, None, "Osage"),
    ("oss", None, "os", "Ossetian"),
    ("pag", None, None, "Pangasinan"),
    ("pam", None, None, "Pampanga"),
    ("pan", None, "pa", "Panjabi"),
    ("pap", None, None, "Papiamento"),
    ("pau", None, None, "Palauan"),
    ("pol", None, "pl", "Polish"),
    ("pon", None, None, "Pohnpeian"),
    ("por", None, "pt", "Portuguese"),
    ("pus", None, "ps", "Pushto"),
    ("que", None, "qu", "Quechua"),
    ("raj", None, None, "Rajasthani"),
    ("rap", None, None, "Rapanui"),
    ("rar", None, None, "Rarotongan"),
    ("roh", None, "rm", "Romansh"),
    ("rom", None, None, "Romany"),
    ("rum", "ron", "ro", "Romanian"),
    ("run", None, "rn", "Rundi"),
    ("rup", None, None, "Aromanian"),
    ("rus", None, "ru", "Russian"),
    ("sad", None, None, "Sandawe"),
    ("sag", None, "sg", "Sango"),
    ("sah", None, None, "Yakut"),
    ("sas", None, None, "Sasak"),
    ("sat", None, None, "Santali"),
    ("scn", None, None, "Sicilian"),
    ("sco", None, None, "Scots"),
    ("sel", None, None, "Selkup"),
    ("shn", None, None, "Shan"),
    ("sid", None, None, "Sidamo"),
    ("sin", None, "si", "Sinhala"),
    ("slo", "slk", "sk", "Slovak"),
    ("slv", None, "sl", "Slovenian"),
    ("sma", None, None, "Southern Sami"),
    ("sme", None, "se", "Northern Sami"),
    ("smj", None, None, "Lule Sami"),
    ("smn", None, None, "Inari Sami"),
    ("smo", None, "sm", "Samoan"),
    ("sms", None, None, "Skolt Sami"),
    ("sna", None, "sn", "Shona"),
    ("snd", None, "sd", "Sindhi"),
    ("snk", None, None, "Soninke"),
    ("som", None, "so", "Somali"),
    ("sot", None, "st", "Sotho Southern"),
    ("spa", None, "es", "Spanish"),
    ("srd", None, "sc", "Sardinian"),
    ("srn", None, None, "Sranan Tongo"),
    ("srp", None, "sr", "Serbian"),
    ("srr", None, None, "Serer"),
    ("ssw", None, "ss", "Swati"),
    ("suk", None, None, "Sukuma"),
    ("sun", None, "su", "Sundanese"),
    ("sus", None, None, "Susu"),
    ("swa", None, "sw", "Swahili"),
    ("swe", None, "sv", "Swedish"),
    ("syr", None, None, "Syriac"),
    ("tah", None, "ty", "Tahitian"),
    ("tam", None, "ta", "Tamil"),
    ("tat", None, "tt", "Tatar"),
    ("tel", None, "te", "Telugu"),
    ("tem", None, None, "Timne"),
    ("ter", None, None, "Tereno"),
    ("tet", None, None, "Tetum"),
    ("tgk", None, "tg", "Tajik"),
    ("tgl", None, "tl", "Tagalog"),
    ("tha", None, "th", "Thai"),
    ("tig", None, None, "Tigre"),
    ("tir", None, "ti", "Tigrinya"),
    ("tiv", None, None, "Tiv"),
    ("tkl", None, None, "Tokelau"),
    ("tli", None, None, "Tlingit"),
    ("tmh", None, None, "Tamashek"),
    ("tog", None, None, "Tonga (Nyasa)"),
    ("ton", None, "to", "Tonga (Tonga Islands)"),
    ("tpi", None, None, "Tok Pisin"),
    ("tsi", None, None, "Tsimshian"),
    ("tsn", None, "tn", "Tswana"),
    ("tso", None, "ts", "Tsonga"),
    ("tuk", None, "tk", "Turkmen"),
    ("tum", None, None, "Tumbuka"),
    ("tur", None, "tr", "Turkish"),
    ("tvl", None, None, "Tuvalu"),
    ("twi", None, "tw", "Twi"),
    ("tyv", None, None, "Tuvinian"),
    ("udm", None, None, "Udmurt"),
    ("uig", None, "ug", "Uighur"),
    ("ukr", None, "uk", "Ukrainian"),
    ("umb", None, None, "Umbundu"),
    ("urd", None, "ur", "Urdu"),
    ("uzb", None, "uz", "Uzbek"),
    ("vai", None, None, "Vai"),
    ("ven", None, "ve", "Venda"),
    ("vie", None, "vi", "Vietnamese"),
    ("vot", None, None, "Votic"),
    ("wal", None, None, "Walamo"),
    ("war", None, None, "Waray"),
    ("was", None, None, "Washo"),
    ("wln", None, "wa", "Walloon"),
    ("wol", None, "wo", "Wolof"),
    ("xal", None, None, "Kalmyk"),
    ("xho", None, "xh", "Xhosa"),
    ("yao", None, None, "Yao"),
    ("yap", None, None, "Yapese"),
    ("yid", None, "yi", "Yiddish"),
    ("yor", None, "yo", "Yoruba"),
    ("zap", None, None, "Zapotec"),
    ("zen", None, None, "Zenaga"),
    ("zgh", None, None, "Standard Moroccan Tamazight"),
    ("zha", None, "za", "Zhuang"),
    ("zul", None, "zu", "Zulu"),
    ("zun", None, None, "Zuni"),
    ("zza", None, None, "Zaza"),
    # Especiales
    ("und", None, None, "Undetermined"),
    ("mul", None, None, "Multiple languages"),
    ("zxx", None, None, "No linguistic content"),
    ("mis", None, None, "Uncoded languages"),
)
