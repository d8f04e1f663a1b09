"""Static case mapping used when the native case facility is switched off.

Only the lower-to-upper direction is spelled out. The reverse mapping is
derived from it on first use; where several lowercase forms share one capital
(``ı``/``i``, ``ς``/``σ``) the entry listed last wins.
"""

LOWER_TO_UPPER = {
    "ｚ": "Ｚ",
    "ｙ": "Ｙ",
    "ｘ": "Ｘ",
    "ｗ": "Ｗ",
    "ｖ": "Ｖ",
    "ｕ": "Ｕ",
    "ｔ": "Ｔ",
    "ｓ": "Ｓ",
    "ｒ": "Ｒ",
    "ｑ": "Ｑ",
    "ｐ": "Ｐ",
    "ｏ": "Ｏ",
    "ｎ": "Ｎ",
    "ｍ": "Ｍ",
    "ｌ": "Ｌ",
    "ｋ": "Ｋ",
    "ｊ": "Ｊ",
    "ｉ": "Ｉ",
    "ｈ": "Ｈ",
    "ｇ": "Ｇ",
    "ｆ": "Ｆ",
    "ｅ": "Ｅ",
    "ｄ": "Ｄ",
    "ｃ": "Ｃ",
    "ｂ": "Ｂ",
    "ａ": "Ａ",
    "ῳ": "ῼ",
    "ῥ": "Ῥ",
    "ῡ": "Ῡ",
    "ῑ": "Ῑ",
    "ῐ": "Ῐ",
    "ῃ": "ῌ",
    "ι": "Ι",
    "ᾳ": "ᾼ",
    "ᾱ": "Ᾱ",
    "ᾰ": "Ᾰ",
    "ᾧ": "ᾯ",
    "ᾦ": "ᾮ",
    "ᾥ": "ᾭ",
    "ᾤ": "ᾬ",
    "ᾣ": "ᾫ",
    "ᾢ": "ᾪ",
    "ᾡ": "ᾩ",
    "ᾗ": "ᾟ",
    "ᾖ": "ᾞ",
    "ᾕ": "ᾝ",
    "ᾔ": "ᾜ",
    "ᾓ": "ᾛ",
    "ᾒ": "ᾚ",
    "ᾑ": "ᾙ",
    "ᾐ": "ᾘ",
    "ᾇ": "ᾏ",
    "ᾆ": "ᾎ",
    "ᾅ": "ᾍ",
    "ᾄ": "ᾌ",
    "ᾃ": "ᾋ",
    "ᾂ": "ᾊ",
    "ᾁ": "ᾉ",
    "ᾀ": "ᾈ",
    "ώ": "Ώ",
    "ὼ": "Ὼ",
    "ύ": "Ύ",
    "ὺ": "Ὺ",
    "ό": "Ό",
    "ὸ": "Ὸ",
    "ί": "Ί",
    "ὶ": "Ὶ",
    "ή": "Ή",
    "ὴ": "Ὴ",
    "έ": "Έ",
    "ὲ": "Ὲ",
    "ά": "Ά",
    "ὰ": "Ὰ",
    "ὧ": "Ὧ",
    "ὦ": "Ὦ",
    "ὥ": "Ὥ",
    "ὤ": "Ὤ",
    "ὣ": "Ὣ",
    "ὢ": "Ὢ",
    "ὡ": "Ὡ",
    "ὗ": "Ὗ",
    "ὕ": "Ὕ",
    "ὓ": "Ὓ",
    "ὑ": "Ὑ",
    "ὅ": "Ὅ",
    "ὄ": "Ὄ",
    "ὃ": "Ὃ",
    "ὂ": "Ὂ",
    "ὁ": "Ὁ",
    "ὀ": "Ὀ",
    "ἷ": "Ἷ",
    "ἶ": "Ἶ",
    "ἵ": "Ἵ",
    "ἴ": "Ἴ",
    "ἳ": "Ἳ",
    "ἲ": "Ἲ",
    "ἱ": "Ἱ",
    "ἰ": "Ἰ",
    "ἧ": "Ἧ",
    "ἦ": "Ἦ",
    "ἥ": "Ἥ",
    "ἤ": "Ἤ",
    "ἣ": "Ἣ",
    "ἢ": "Ἢ",
    "ἡ": "Ἡ",
    "ἕ": "Ἕ",
    "ἔ": "Ἔ",
    "ἓ": "Ἓ",
    "ἒ": "Ἒ",
    "ἑ": "Ἑ",
    "ἐ": "Ἐ",
    "ἇ": "Ἇ",
    "ἆ": "Ἆ",
    "ἅ": "Ἅ",
    "ἄ": "Ἄ",
    "ἃ": "Ἃ",
    "ἂ": "Ἂ",
    "ἁ": "Ἁ",
    "ἀ": "Ἀ",
    "ỹ": "Ỹ",
    "ỷ": "Ỷ",
    "ỵ": "Ỵ",
    "ỳ": "Ỳ",
    "ự": "Ự",
    "ữ": "Ữ",
    "ử": "Ử",
    "ừ": "Ừ",
    "ứ": "Ứ",
    "ủ": "Ủ",
    "ụ": "Ụ",
    "ợ": "Ợ",
    "ỡ": "Ỡ",
    "ở": "Ở",
    "ờ": "Ờ",
    "ớ": "Ớ",
    "ộ": "Ộ",
    "ỗ": "Ỗ",
    "ổ": "Ổ",
    "ồ": "Ồ",
    "ố": "Ố",
    "ỏ": "Ỏ",
    "ọ": "Ọ",
    "ị": "Ị",
    "ỉ": "Ỉ",
    "ệ": "Ệ",
    "ễ": "Ễ",
    "ể": "Ể",
    "ề": "Ề",
    "ế": "Ế",
    "ẽ": "Ẽ",
    "ẻ": "Ẻ",
    "ẹ": "Ẹ",
    "ặ": "Ặ",
    "ẵ": "Ẵ",
    "ẳ": "Ẳ",
    "ằ": "Ằ",
    "ắ": "Ắ",
    "ậ": "Ậ",
    "ẫ": "Ẫ",
    "ẩ": "Ẩ",
    "ầ": "Ầ",
    "ấ": "Ấ",
    "ả": "Ả",
    "ạ": "Ạ",
    "ẛ": "Ṡ",
    "ẕ": "Ẕ",
    "ẓ": "Ẓ",
    "ẑ": "Ẑ",
    "ẏ": "Ẏ",
    "ẍ": "Ẍ",
    "ẋ": "Ẋ",
    "ẉ": "Ẉ",
    "ẇ": "Ẇ",
    "ẅ": "Ẅ",
    "ẃ": "Ẃ",
    "ẁ": "Ẁ",
    "ṿ": "Ṿ",
    "ṽ": "Ṽ",
    "ṻ": "Ṻ",
    "ṹ": "Ṹ",
    "ṷ": "Ṷ",
    "ṵ": "Ṵ",
    "ṳ": "Ṳ",
    "ṱ": "Ṱ",
    "ṯ": "Ṯ",
    "ṭ": "Ṭ",
    "ṫ": "Ṫ",
    "ṩ": "Ṩ",
    "ṧ": "Ṧ",
    "ṥ": "Ṥ",
    "ṣ": "Ṣ",
    "ṡ": "Ṡ",
    "ṟ": "Ṟ",
    "ṝ": "Ṝ",
    "ṛ": "Ṛ",
    "ṙ": "Ṙ",
    "ṗ": "Ṗ",
    "ṕ": "Ṕ",
    "ṓ": "Ṓ",
    "ṑ": "Ṑ",
    "ṏ": "Ṏ",
    "ṍ": "Ṍ",
    "ṋ": "Ṋ",
    "ṉ": "Ṉ",
    "ṇ": "Ṇ",
    "ṅ": "Ṅ",
    "ṃ": "Ṃ",
    "ṁ": "Ṁ",
    "ḿ": "Ḿ",
    "ḽ": "Ḽ",
    "ḻ": "Ḻ",
    "ḹ": "Ḹ",
    "ḷ": "Ḷ",
    "ḵ": "Ḵ",
    "ḳ": "Ḳ",
    "ḱ": "Ḱ",
    "ḯ": "Ḯ",
    "ḭ": "Ḭ",
    "ḫ": "Ḫ",
    "ḩ": "Ḩ",
    "ḧ": "Ḧ",
    "ḥ": "Ḥ",
    "ḣ": "Ḣ",
    "ḡ": "Ḡ",
    "ḟ": "Ḟ",
    "ḝ": "Ḝ",
    "ḛ": "Ḛ",
    "ḙ": "Ḙ",
    "ḗ": "Ḗ",
    "ḕ": "Ḕ",
    "ḓ": "Ḓ",
    "ḑ": "Ḑ",
    "ḏ": "Ḏ",
    "ḍ": "Ḍ",
    "ḋ": "Ḋ",
    "ḉ": "Ḉ",
    "ḇ": "Ḇ",
    "ḅ": "Ḅ",
    "ḃ": "Ḃ",
    "ḁ": "Ḁ",
    "ֆ": "Ֆ",
    "օ": "Օ",
    "ք": "Ք",
    "փ": "Փ",
    "ւ": "Ւ",
    "ց": "Ց",
    "ր": "Ր",
    "տ": "Տ",
    "վ": "Վ",
    "ս": "Ս",
    "ռ": "Ռ",
    "ջ": "Ջ",
    "պ": "Պ",
    "չ": "Չ",
    "ո": "Ո",
    "շ": "Շ",
    "ն": "Ն",
    "յ": "Յ",
    "մ": "Մ",
    "ճ": "Ճ",
    "ղ": "Ղ",
    "ձ": "Ձ",
    "հ": "Հ",
    "կ": "Կ",
    "ծ": "Ծ",
    "խ": "Խ",
    "լ": "Լ",
    "ի": "Ի",
    "ժ": "Ժ",
    "թ": "Թ",
    "ը": "Ը",
    "է": "Է",
    "զ": "Զ",
    "ե": "Ե",
    "դ": "Դ",
    "գ": "Գ",
    "բ": "Բ",
    "ա": "Ա",
    "ԏ": "Ԏ",
    "ԍ": "Ԍ",
    "ԋ": "Ԋ",
    "ԉ": "Ԉ",
    "ԇ": "Ԇ",
    "ԅ": "Ԅ",
    "ԃ": "Ԃ",
    "ԁ": "Ԁ",
    "ӹ": "Ӹ",
    "ӵ": "Ӵ",
    "ӳ": "Ӳ",
    "ӱ": "Ӱ",
    "ӯ": "Ӯ",
    "ӭ": "Ӭ",
    "ӫ": "Ӫ",
    "ө": "Ө",
    "ӧ": "Ӧ",
    "ӥ": "Ӥ",
    "ӣ": "Ӣ",
    "ӡ": "Ӡ",
    "ӟ": "Ӟ",
    "ӝ": "Ӝ",
    "ӛ": "Ӛ",
    "ә": "Ә",
    "ӗ": "Ӗ",
    "ӕ": "Ӕ",
    "ӓ": "Ӓ",
    "ӑ": "Ӑ",
    "ӎ": "Ӎ",
    "ӌ": "Ӌ",
    "ӊ": "Ӊ",
    "ӈ": "Ӈ",
    "ӆ": "Ӆ",
    "ӄ": "Ӄ",
    "ӂ": "Ӂ",
    "ҿ": "Ҿ",
    "ҽ": "Ҽ",
    "һ": "Һ",
    "ҹ": "Ҹ",
    "ҷ": "Ҷ",
    "ҵ": "Ҵ",
    "ҳ": "Ҳ",
    "ұ": "Ұ",
    "ү": "Ү",
    "ҭ": "Ҭ",
    "ҫ": "Ҫ",
    "ҩ": "Ҩ",
    "ҧ": "Ҧ",
    "ҥ": "Ҥ",
    "ң": "Ң",
    "ҡ": "Ҡ",
    "ҟ": "Ҟ",
    "ҝ": "Ҝ",
    "қ": "Қ",
    "ҙ": "Ҙ",
    "җ": "Җ",
    "ҕ": "Ҕ",
    "ғ": "Ғ",
    "ґ": "Ґ",
    "ҏ": "Ҏ",
    "ҍ": "Ҍ",
    "ҋ": "Ҋ",
    "ҁ": "Ҁ",
    "ѿ": "Ѿ",
    "ѽ": "Ѽ",
    "ѻ": "Ѻ",
    "ѹ": "Ѹ",
    "ѷ": "Ѷ",
    "ѵ": "Ѵ",
    "ѳ": "Ѳ",
    "ѱ": "Ѱ",
    "ѯ": "Ѯ",
    "ѭ": "Ѭ",
    "ѫ": "Ѫ",
    "ѩ": "Ѩ",
    "ѧ": "Ѧ",
    "ѥ": "Ѥ",
    "ѣ": "Ѣ",
    "ѡ": "Ѡ",
    "џ": "Џ",
    "ў": "Ў",
    "ѝ": "Ѝ",
    "ќ": "Ќ",
    "ћ": "Ћ",
    "њ": "Њ",
    "љ": "Љ",
    "ј": "Ј",
    "ї": "Ї",
    "і": "І",
    "ѕ": "Ѕ",
    "є": "Є",
    "ѓ": "Ѓ",
    "ђ": "Ђ",
    "ё": "Ё",
    "ѐ": "Ѐ",
    "я": "Я",
    "ю": "Ю",
    "э": "Э",
    "ь": "Ь",
    "ы": "Ы",
    "ъ": "Ъ",
    "щ": "Щ",
    "ш": "Ш",
    "ч": "Ч",
    "ц": "Ц",
    "х": "Х",
    "ф": "Ф",
    "у": "У",
    "т": "Т",
    "с": "С",
    "р": "Р",
    "п": "П",
    "о": "О",
    "н": "Н",
    "м": "М",
    "л": "Л",
    "к": "К",
    "й": "Й",
    "и": "И",
    "з": "З",
    "ж": "Ж",
    "е": "Е",
    "д": "Д",
    "г": "Г",
    "в": "В",
    "б": "Б",
    "а": "А",
    "ϵ": "Ε",
    "ϲ": "Σ",
    "ϱ": "Ρ",
    "ϰ": "Κ",
    "ϯ": "Ϯ",
    "ϭ": "Ϭ",
    "ϫ": "Ϫ",
    "ϩ": "Ϩ",
    "ϧ": "Ϧ",
    "ϥ": "Ϥ",
    "ϣ": "Ϣ",
    "ϡ": "Ϡ",
    "ϟ": "Ϟ",
    "ϝ": "Ϝ",
    "ϛ": "Ϛ",
    "ϙ": "Ϙ",
    "ϖ": "Π",
    "ϕ": "Φ",
    "ϑ": "Θ",
    "ϐ": "Β",
    "ώ": "Ώ",
    "ύ": "Ύ",
    "ό": "Ό",
    "ϋ": "Ϋ",
    "ϊ": "Ϊ",
    "ω": "Ω",
    "ψ": "Ψ",
    "χ": "Χ",
    "φ": "Φ",
    "υ": "Υ",
    "τ": "Τ",
    "ς": "Σ",
    "σ": "Σ",
    "ρ": "Ρ",
    "π": "Π",
    "ο": "Ο",
    "ξ": "Ξ",
    "ν": "Ν",
    "μ": "Μ",
    "λ": "Λ",
    "κ": "Κ",
    "ι": "Ι",
    "θ": "Θ",
    "η": "Η",
    "ζ": "Ζ",
    "ε": "Ε",
    "δ": "Δ",
    "γ": "Γ",
    "β": "Β",
    "α": "Α",
    "ί": "Ί",
    "ή": "Ή",
    "έ": "Έ",
    "ά": "Ά",
    "ʒ": "Ʒ",
    "ʋ": "Ʋ",
    "ʊ": "Ʊ",
    "ʈ": "Ʈ",
    "ʃ": "Ʃ",
    "ʀ": "Ʀ",
    "ɵ": "Ɵ",
    "ɲ": "Ɲ",
    "ɯ": "Ɯ",
    "ɩ": "Ɩ",
    "ɨ": "Ɨ",
    "ɣ": "Ɣ",
    "ɛ": "Ɛ",
    "ə": "Ə",
    "ɗ": "Ɗ",
    "ɖ": "Ɖ",
    "ɔ": "Ɔ",
    "ɓ": "Ɓ",
    "ȳ": "Ȳ",
    "ȱ": "Ȱ",
    "ȯ": "Ȯ",
    "ȭ": "Ȭ",
    "ȫ": "Ȫ",
    "ȩ": "Ȩ",
    "ȧ": "Ȧ",
    "ȥ": "Ȥ",
    "ȣ": "Ȣ",
    "ȟ": "Ȟ",
    "ȝ": "Ȝ",
    "ț": "Ț",
    "ș": "Ș",
    "ȗ": "Ȗ",
    "ȕ": "Ȕ",
    "ȓ": "Ȓ",
    "ȑ": "Ȑ",
    "ȏ": "Ȏ",
    "ȍ": "Ȍ",
    "ȋ": "Ȋ",
    "ȉ": "Ȉ",
    "ȇ": "Ȇ",
    "ȅ": "Ȅ",
    "ȃ": "Ȃ",
    "ȁ": "Ȁ",
    "ǿ": "Ǿ",
    "ǽ": "Ǽ",
    "ǻ": "Ǻ",
    "ǹ": "Ǹ",
    "ǵ": "Ǵ",
    "ǳ": "ǲ",
    "ǯ": "Ǯ",
    "ǭ": "Ǭ",
    "ǫ": "Ǫ",
    "ǩ": "Ǩ",
    "ǧ": "Ǧ",
    "ǥ": "Ǥ",
    "ǣ": "Ǣ",
    "ǡ": "Ǡ",
    "ǟ": "Ǟ",
    "ǝ": "Ǝ",
    "ǜ": "Ǜ",
    "ǚ": "Ǚ",
    "ǘ": "Ǘ",
    "ǖ": "Ǖ",
    "ǔ": "Ǔ",
    "ǒ": "Ǒ",
    "ǐ": "Ǐ",
    "ǎ": "Ǎ",
    "ǌ": "ǋ",
    "ǉ": "ǈ",
    "ǆ": "ǅ",
    "ƿ": "Ƿ",
    "ƽ": "Ƽ",
    "ƹ": "Ƹ",
    "ƶ": "Ƶ",
    "ƴ": "Ƴ",
    "ư": "Ư",
    "ƭ": "Ƭ",
    "ƨ": "Ƨ",
    "ƥ": "Ƥ",
    "ƣ": "Ƣ",
    "ơ": "Ơ",
    "ƞ": "Ƞ",
    "ƙ": "Ƙ",
    "ƕ": "Ƕ",
    "ƒ": "Ƒ",
    "ƌ": "Ƌ",
    "ƈ": "Ƈ",
    "ƅ": "Ƅ",
    "ƃ": "Ƃ",
    "ſ": "S",
    "ž": "Ž",
    "ż": "Ż",
    "ź": "Ź",
    "ŷ": "Ŷ",
    "ŵ": "Ŵ",
    "ų": "Ų",
    "ű": "Ű",
    "ů": "Ů",
    "ŭ": "Ŭ",
    "ū": "Ū",
    "ũ": "Ũ",
    "ŧ": "Ŧ",
    "ť": "Ť",
    "ţ": "Ţ",
    "š": "Š",
    "ş": "Ş",
    "ŝ": "Ŝ",
    "ś": "Ś",
    "ř": "Ř",
    "ŗ": "Ŗ",
    "ŕ": "Ŕ",
    "œ": "Œ",
    "ő": "Ő",
    "ŏ": "Ŏ",
    "ō": "Ō",
    "ŋ": "Ŋ",
    "ň": "Ň",
    "ņ": "Ņ",
    "ń": "Ń",
    "ł": "Ł",
    "ŀ": "Ŀ",
    "ľ": "Ľ",
    "ļ": "Ļ",
    "ĺ": "Ĺ",
    "ķ": "Ķ",
    "ĵ": "Ĵ",
    "ĳ": "Ĳ",
    "ı": "I",
    "į": "Į",
    "ĭ": "Ĭ",
    "ī": "Ī",
    "ĩ": "Ĩ",
    "ħ": "Ħ",
    "ĥ": "Ĥ",
    "ģ": "Ģ",
    "ġ": "Ġ",
    "ğ": "Ğ",
    "ĝ": "Ĝ",
    "ě": "Ě",
    "ę": "Ę",
    "ė": "Ė",
    "ĕ": "Ĕ",
    "ē": "Ē",
    "đ": "Đ",
    "ď": "Ď",
    "č": "Č",
    "ċ": "Ċ",
    "ĉ": "Ĉ",
    "ć": "Ć",
    "ą": "Ą",
    "ă": "Ă",
    "ā": "Ā",
    "ÿ": "Ÿ",
    "þ": "Þ",
    "ý": "Ý",
    "ü": "Ü",
    "û": "Û",
    "ú": "Ú",
    "ù": "Ù",
    "ø": "Ø",
    "ö": "Ö",
    "õ": "Õ",
    "ô": "Ô",
    "ó": "Ó",
    "ò": "Ò",
    "ñ": "Ñ",
    "ð": "Ð",
    "ï": "Ï",
    "î": "Î",
    "í": "Í",
    "ì": "Ì",
    "ë": "Ë",
    "ê": "Ê",
    "é": "É",
    "è": "È",
    "ç": "Ç",
    "æ": "Æ",
    "å": "Å",
    "ä": "Ä",
    "ã": "Ã",
    "â": "Â",
    "á": "Á",
    "à": "À",
    "µ": "Μ",
    "z": "Z",
    "y": "Y",
    "x": "X",
    "w": "W",
    "v": "V",
    "u": "U",
    "t": "T",
    "s": "S",
    "r": "R",
    "q": "Q",
    "p": "P",
    "o": "O",
    "n": "N",
    "m": "M",
    "l": "L",
    "k": "K",
    "j": "J",
    "i": "I",
    "h": "H",
    "g": "G",
    "f": "F",
    "e": "E",
    "d": "D",
    "c": "C",
    "b": "B",
    "a": "A",
}
