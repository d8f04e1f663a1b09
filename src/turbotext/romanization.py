"""Romanization table for non-Latin scripts.

A lossy, one-way mapping from Cyrillic, Georgian, Sanskrit, Hebrew, Arabic,
Greek, Thai, Korean and Japanese kana to plain ASCII. Keys may be clusters of
up to four characters, so the table must be applied longest-match-first.
"""

ROMANIZATION = {
    # Scandinavian letters keep their base vowel here, unlike deaccent()
    "å": "a",
    "Å": "A",
    "ä": "a",
    "Ä": "A",
    "ö": "o",
    "Ö": "O",

    # Russian Cyrillic
    "а": "a",
    "А": "A",
    "б": "b",
    "Б": "B",
    "в": "v",
    "В": "V",
    "г": "g",
    "Г": "G",
    "д": "d",
    "Д": "D",
    "е": "e",
    "Е": "E",
    "ё": "jo",
    "Ё": "Jo",
    "ж": "zh",
    "Ж": "Zh",
    "з": "z",
    "З": "Z",
    "и": "i",
    "И": "I",
    "й": "j",
    "Й": "J",
    "к": "k",
    "К": "K",
    "л": "l",
    "Л": "L",
    "м": "m",
    "М": "M",
    "н": "n",
    "Н": "N",
    "о": "o",
    "О": "O",
    "п": "p",
    "П": "P",
    "р": "r",
    "Р": "R",
    "с": "s",
    "С": "S",
    "т": "t",
    "Т": "T",
    "у": "u",
    "У": "U",
    "ф": "f",
    "Ф": "F",
    "х": "x",
    "Х": "X",
    "ц": "c",
    "Ц": "C",
    "ч": "ch",
    "Ч": "Ch",
    "ш": "sh",
    "Ш": "Sh",
    "щ": "sch",
    "Щ": "Sch",
    "ъ": "",
    "Ъ": "",
    "ы": "y",
    "Ы": "Y",
    "ь": "",
    "Ь": "",
    "э": "eh",
    "Э": "Eh",
    "ю": "ju",
    "Ю": "Ju",
    "я": "ja",
    "Я": "Ja",
    # Ukrainian additions
    "Ґ": "Gh",
    "ґ": "gh",
    "Є": "Je",
    "є": "je",
    "І": "I",
    "і": "i",
    "Ї": "Ji",
    "ї": "ji",
    # Georgian
    "ა": "a",
    "ბ": "b",
    "გ": "g",
    "დ": "d",
    "ე": "e",
    "ვ": "v",
    "ზ": "z",
    "თ": "th",
    "ი": "i",
    "კ": "p",
    "ლ": "l",
    "მ": "m",
    "ნ": "n",
    "ო": "o",
    "პ": "p",
    "ჟ": "zh",
    "რ": "r",
    "ს": "s",
    "ტ": "t",
    "უ": "u",
    "ფ": "ph",
    "ქ": "kh",
    "ღ": "gh",
    "ყ": "q",
    "შ": "sh",
    "ჩ": "ch",
    "ც": "c",
    "ძ": "dh",
    "წ": "w",
    "ჭ": "j",
    "ხ": "x",
    "ჯ": "jh",
    "ჰ": "xh",
    # Sanskrit
    "अ": "a",
    "आ": "ah",
    "इ": "i",
    "ई": "ih",
    "उ": "u",
    "ऊ": "uh",
    "ऋ": "ry",
    "ॠ": "ryh",
    "ऌ": "ly",
    "ॡ": "lyh",
    "ए": "e",
    "ऐ": "ay",
    "ओ": "o",
    "औ": "aw",
    "अ\u0902": "amh",
    "अ\u0903": "aq",
    "क": "k",
    "ख": "kh",
    "ग": "g",
    "घ": "gh",
    "ङ": "nh",
    "च": "c",
    "छ": "ch",
    "ज": "j",
    "झ": "jh",
    "ञ": "ny",
    "ट": "tq",
    "ठ": "tqh",
    "ड": "dq",
    "ढ": "dqh",
    "ण": "nq",
    "त": "t",
    "थ": "th",
    "द": "d",
    "ध": "dh",
    "न": "n",
    "प": "p",
    "फ": "ph",
    "ब": "b",
    "भ": "bh",
    "म": "m",
    "य": "z",
    "र": "r",
    "ल": "l",
    "व": "v",
    "श": "sh",
    "ष": "sqh",
    "स": "s",
    "ह": "x",
    # Sanskrit diacritics
    "Ā": "A",
    "Ī": "I",
    "Ū": "U",
    "Ṛ": "R",
    "Ṝ": "R",
    "Ṅ": "N",
    "Ñ": "N",
    "Ṭ": "T",
    "Ḍ": "D",
    "Ṇ": "N",
    "Ś": "S",
    "Ṣ": "S",
    "Ṁ": "M",
    "Ṃ": "M",
    "Ḥ": "H",
    "Ḷ": "L",
    "Ḹ": "L",
    "ā": "a",
    "ī": "i",
    "ū": "u",
    "ṛ": "r",
    "ṝ": "r",
    "ṅ": "n",
    "ñ": "n",
    "ṭ": "t",
    "ḍ": "d",
    "ṇ": "n",
    "ś": "s",
    "ṣ": "s",
    "ṁ": "m",
    "ṃ": "m",
    "ḥ": "h",
    "ḷ": "l",
    "ḹ": "l",
    # Hebrew
    "א": "a",
    "ב": "b",
    "ג": "g",
    "ד": "d",
    "ה": "h",
    "ו": "v",
    "ז": "z",
    "ח": "kh",
    "ט": "th",
    "י": "y",
    "ך": "h",
    "כ": "k",
    "ל": "l",
    "ם": "m",
    "מ": "m",
    "ן": "n",
    "נ": "n",
    "ס": "s",
    "ע": "ah",
    "ף": "f",
    "פ": "p",
    "ץ": "c",
    "צ": "c",
    "ק": "q",
    "ר": "r",
    "ש": "sh",
    "ת": "t",
    # Arabic
    "ا": "a",
    "ب": "b",
    "ت": "t",
    "ث": "th",
    "ج": "g",
    "ح": "xh",
    "خ": "x",
    "د": "d",
    "ذ": "dh",
    "ر": "r",
    "ز": "z",
    "س": "s",
    "ش": "sh",
    "ص": "s'",
    "ض": "d'",
    "ط": "t'",
    "ظ": "z'",
    "ع": "y",
    "غ": "gh",
    "ف": "f",
    "ق": "q",
    "ك": "k",
    "ل": "l",
    "م": "m",
    "ن": "n",
    "ه": "x'",
    "و": "u",
    "ي": "i",

    # Japanese kana. Longer clusters must win over their prefixes.
    # Hiragana

    # Three-kana syllables; small tsu doubles the next consonant
    "っびゃ": "bbya",
    "っびぇ": "bbye",
    "っびぃ": "bbyi",
    "っびょ": "bbyo",
    "っびゅ": "bbyu",
    "っぴゃ": "ppya",
    "っぴぇ": "ppye",
    "っぴぃ": "ppyi",
    "っぴょ": "ppyo",
    "っぴゅ": "ppyu",
    "っちゃ": "ccha",
    "っちぇ": "cche",
    "っちょ": "ccho",
    "っちゅ": "cchu",
    "っきゃ": "kkya",
    "っきぇ": "kkye",
    "っきぃ": "kkyi",
    "っきょ": "kkyo",
    "っきゅ": "kkyu",
    "っぎゃ": "ggya",
    "っぎぇ": "ggye",
    "っぎぃ": "ggyi",
    "っぎょ": "ggyo",
    "っぎゅ": "ggyu",
    "っみゃ": "mmya",
    "っみぇ": "mmye",
    "っみぃ": "mmyi",
    "っみょ": "mmyo",
    "っみゅ": "mmyu",
    "っにゃ": "nnya",
    "っにぇ": "nnye",
    "っにぃ": "nnyi",
    "っにょ": "nnyo",
    "っにゅ": "nnyu",
    "っりゃ": "rrya",
    "っりぇ": "rrye",
    "っりぃ": "rryi",
    "っりょ": "rryo",
    "っりゅ": "rryu",
    "っしゃ": "ssha",
    "っしぇ": "sshe",
    "っしょ": "ssho",
    "っしゅ": "sshu",

    # Syllabic n before a vowel or y ('n' + 'i' is not 'ni')
    "んあ": "n_a",
    "んえ": "n_e",
    "んい": "n_i",
    "んお": "n_o",
    "んう": "n_u",
    "んや": "n_ya",
    "んよ": "n_yo",
    "んゆ": "n_yu",

    # Two-kana syllables
    "ふぁ": "fa",
    "ふぇ": "fe",
    "ふぃ": "fi",
    "ふぉ": "fo",
    "ちゃ": "cha",
    "ちぇ": "che",
    "ちょ": "cho",
    "ちゅ": "chu",
    "ひゃ": "hya",
    "ひぇ": "hye",
    "ひぃ": "hyi",
    "ひょ": "hyo",
    "ひゅ": "hyu",
    "びゃ": "bya",
    "びぇ": "bye",
    "びぃ": "byi",
    "びょ": "byo",
    "びゅ": "byu",
    "ぴゃ": "pya",
    "ぴぇ": "pye",
    "ぴぃ": "pyi",
    "ぴょ": "pyo",
    "ぴゅ": "pyu",
    "きゃ": "kya",
    "きぇ": "kye",
    "きぃ": "kyi",
    "きょ": "kyo",
    "きゅ": "kyu",
    "ぎゃ": "gya",
    "ぎぇ": "gye",
    "ぎぃ": "gyi",
    "ぎょ": "gyo",
    "ぎゅ": "gyu",
    "みゃ": "mya",
    "みぇ": "mye",
    "みぃ": "myi",
    "みょ": "myo",
    "みゅ": "myu",
    "にゃ": "nya",
    "にぇ": "nye",
    "にぃ": "nyi",
    "にょ": "nyo",
    "にゅ": "nyu",
    "りゃ": "rya",
    "りぇ": "rye",
    "りぃ": "ryi",
    "りょ": "ryo",
    "りゅ": "ryu",
    "しゃ": "sha",
    "しぇ": "she",
    "しょ": "sho",
    "しゅ": "shu",
    "じゃ": "ja",
    "じぇ": "je",
    "じょ": "jo",
    "じゅ": "ju",
    "うぇ": "we",
    "うぃ": "wi",
    "いぇ": "ye",

    # Two-kana syllables with a doubled consonant
    "っば": "bba",
    "っべ": "bbe",
    "っび": "bbi",
    "っぼ": "bbo",
    "っぶ": "bbu",
    "っぱ": "ppa",
    "っぺ": "ppe",
    "っぴ": "ppi",
    "っぽ": "ppo",
    "っぷ": "ppu",
    "った": "tta",
    "って": "tte",
    "っち": "cchi",
    "っと": "tto",
    "っつ": "ttsu",
    "っだ": "dda",
    "っで": "dde",
    "っぢ": "ddi",
    "っど": "ddo",
    "っづ": "ddu",
    "っが": "gga",
    "っげ": "gge",
    "っぎ": "ggi",
    "っご": "ggo",
    "っぐ": "ggu",
    "っか": "kka",
    "っけ": "kke",
    "っき": "kki",
    "っこ": "kko",
    "っく": "kku",
    "っま": "mma",
    "っめ": "mme",
    "っみ": "mmi",
    "っも": "mmo",
    "っむ": "mmu",
    "っな": "nna",
    "っね": "nne",
    "っに": "nni",
    "っの": "nno",
    "っぬ": "nnu",
    "っら": "rra",
    "っれ": "rre",
    "っり": "rri",
    "っろ": "rro",
    "っる": "rru",
    "っさ": "ssa",
    "っせ": "sse",
    "っし": "sshi",
    "っそ": "sso",
    "っす": "ssu",
    "っざ": "zza",
    "っぜ": "zze",
    "っじ": "jji",
    "っぞ": "zzo",
    "っず": "zzu",

    # Single kana
    "あ": "a",
    "え": "e",
    "い": "i",
    "お": "o",
    "う": "u",
    "ん": "n",
    "は": "ha",
    "へ": "he",
    "ひ": "hi",
    "ほ": "ho",
    "ふ": "fu",
    "ば": "ba",
    "べ": "be",
    "び": "bi",
    "ぼ": "bo",
    "ぶ": "bu",
    "ぱ": "pa",
    "ぺ": "pe",
    "ぴ": "pi",
    "ぽ": "po",
    "ぷ": "pu",
    "た": "ta",
    "て": "te",
    "ち": "chi",
    "と": "to",
    "つ": "tsu",
    "だ": "da",
    "で": "de",
    "ぢ": "di",
    "ど": "do",
    "づ": "du",
    "が": "ga",
    "げ": "ge",
    "ぎ": "gi",
    "ご": "go",
    "ぐ": "gu",
    "か": "ka",
    "け": "ke",
    "き": "ki",
    "こ": "ko",
    "く": "ku",
    "ま": "ma",
    "め": "me",
    "み": "mi",
    "も": "mo",
    "む": "mu",
    "な": "na",
    "ね": "ne",
    "に": "ni",
    "の": "no",
    "ぬ": "nu",
    "ら": "ra",
    "れ": "re",
    "り": "ri",
    "ろ": "ro",
    "る": "ru",
    "さ": "sa",
    "せ": "se",
    "し": "shi",
    "そ": "so",
    "す": "su",
    "わ": "wa",
    "を": "wo",
    "ざ": "za",
    "ぜ": "ze",
    "じ": "ji",
    "ぞ": "zo",
    "ず": "zu",
    "や": "ya",
    "よ": "yo",
    "ゆ": "yu",
    # Obsolete kana
    "ゑ": "we",
    "ゐ": "wi",

    # Katakana

    # Four-kana syllables; small tsu doubles the consonant, the long mark doubles the vowel
    "ッビャー": "bbyaa",
    "ッビェー": "bbyee",
    "ッビィー": "bbyii",
    "ッビョー": "bbyoo",
    "ッビュー": "bbyuu",
    "ッピャー": "ppyaa",
    "ッピェー": "ppyee",
    "ッピィー": "ppyii",
    "ッピョー": "ppyoo",
    "ッピュー": "ppyuu",
    "ッキャー": "kkyaa",
    "ッキェー": "kkyee",
    "ッキィー": "kkyii",
    "ッキョー": "kkyoo",
    "ッキュー": "kkyuu",
    "ッギャー": "ggyaa",
    "ッギェー": "ggyee",
    "ッギィー": "ggyii",
    "ッギョー": "ggyoo",
    "ッギュー": "ggyuu",
    "ッミャー": "mmyaa",
    "ッミェー": "mmyee",
    "ッミィー": "mmyii",
    "ッミョー": "mmyoo",
    "ッミュー": "mmyuu",
    "ッニャー": "nnyaa",
    "ッニェー": "nnyee",
    "ッニィー": "nnyii",
    "ッニョー": "nnyoo",
    "ッニュー": "nnyuu",
    "ッリャー": "rryaa",
    "ッリェー": "rryee",
    "ッリィー": "rryii",
    "ッリョー": "rryoo",
    "ッリュー": "rryuu",
    "ッシャー": "sshaa",
    "ッシェー": "sshee",
    "ッショー": "sshoo",
    "ッシュー": "sshuu",
    "ッチャー": "cchaa",
    "ッチェー": "cchee",
    "ッチョー": "cchoo",
    "ッチュー": "cchuu",
    "ッティー": "ttii",
    "ッヂィー": "ddii",

    # Three-kana syllables with a doubled vowel
    "ファー": "faa",
    "フォー": "foo",
    "フャー": "fyaa",
    "フェー": "fyee",
    "フィー": "fyii",
    "フョー": "fyoo",
    "フュー": "fyuu",
    "ヒャー": "hyaa",
    "ヒェー": "hyee",
    "ヒィー": "hyii",
    "ヒョー": "hyoo",
    "ヒュー": "hyuu",
    "ビャー": "byaa",
    "ビェー": "byee",
    "ビィー": "byii",
    "ビョー": "byoo",
    "ビュー": "byuu",
    "ピャー": "pyaa",
    "ピェー": "pyee",
    "ピィー": "pyii",
    "ピョー": "pyoo",
    "ピュー": "pyuu",
    "キャー": "kyaa",
    "キェー": "kyee",
    "キィー": "kyii",
    "キョー": "kyoo",
    "キュー": "kyuu",
    "ギャー": "gyaa",
    "ギェー": "gyee",
    "ギィー": "gyii",
    "ギョー": "gyoo",
    "ギュー": "gyuu",
    "ミャー": "myaa",
    "ミェー": "myee",
    "ミィー": "myii",
    "ミョー": "myoo",
    "ミュー": "myuu",
    "ニャー": "nyaa",
    "ニェー": "nyee",
    "ニィー": "nyii",
    "ニョー": "nyoo",
    "ニュー": "nyuu",
    "リャー": "ryaa",
    "リェー": "ryee",
    "リィー": "ryii",
    "リョー": "ryoo",
    "リュー": "ryuu",
    "シャー": "shaa",
    "シェー": "shee",
    "ショー": "shoo",
    "シュー": "shuu",
    "ジャー": "jaa",
    "ジェー": "jee",
    "ジョー": "joo",
    "ジュー": "juu",
    "スァー": "swaa",
    "スェー": "swee",
    "スィー": "swii",
    "スォー": "swoo",
    "スゥー": "swuu",
    "デァー": "daa",
    "デェー": "dee",
    "ディー": "dii",
    "デォー": "doo",
    "デゥー": "duu",
    "チャー": "chaa",
    "チェー": "chee",
    "チョー": "choo",
    "チュー": "chuu",
    "ヂャー": "dyaa",
    "ヂェー": "dyee",
    "ヂョー": "dyoo",
    "ヂュー": "dyuu",
    "ツャー": "tsaa",
    "ツェー": "tsee",
    "ツィー": "tsii",
    "ツョー": "tsoo",
    "トァー": "twaa",
    "トェー": "twee",
    "トィー": "twii",
    "トォー": "twoo",
    "トゥー": "twuu",
    "ドァー": "dwaa",
    "ドェー": "dwee",
    "ドィー": "dwii",
    "ドォー": "dwoo",
    "ドゥー": "dwuu",
    "ウァー": "whaa",
    "ウォー": "whoo",
    "ウゥー": "whuu",
    "ヴャー": "vyaa",
    "ヴョー": "vyoo",
    "ヴュー": "vyuu",
    "ヴァー": "vaa",
    "ヴェー": "vee",
    "ヴィー": "vii",
    "ヴォー": "voo",
    "ヴー": "vuu",
    "ウェー": "wee",
    "ウィー": "wii",
    "イェー": "yee",
    "ティー": "tii",
    "ヂィー": "dii",

    # Three-kana syllables with a doubled consonant
    "ッビャ": "bbya",
    "ッビェ": "bbye",
    "ッビィ": "bbyi",
    "ッビョ": "bbyo",
    "ッビュ": "bbyu",
    "ッピャ": "ppya",
    "ッピェ": "ppye",
    "ッピィ": "ppyi",
    "ッピョ": "ppyo",
    "ッピュ": "ppyu",
    "ッキャ": "kkya",
    "ッキェ": "kkye",
    "ッキィ": "kkyi",
    "ッキョ": "kkyo",
    "ッキュ": "kkyu",
    "ッギャ": "ggya",
    "ッギェ": "ggye",
    "ッギィ": "ggyi",
    "ッギョ": "ggyo",
    "ッギュ": "ggyu",
    "ッミャ": "mmya",
    "ッミェ": "mmye",
    "ッミィ": "mmyi",
    "ッミョ": "mmyo",
    "ッミュ": "mmyu",
    "ッニャ": "nnya",
    "ッニェ": "nnye",
    "ッニィ": "nnyi",
    "ッニョ": "nnyo",
    "ッニュ": "nnyu",
    "ッリャ": "rrya",
    "ッリェ": "rrye",
    "ッリィ": "rryi",
    "ッリョ": "rryo",
    "ッリュ": "rryu",
    "ッシャ": "ssha",
    "ッシェ": "sshe",
    "ッショ": "ssho",
    "ッシュ": "sshu",
    "ッチャ": "ccha",
    "ッチェ": "cche",
    "ッチョ": "ccho",
    "ッチュ": "cchu",
    "ッティ": "tti",
    "ッヂィ": "ddi",

    # Three-kana syllables with both doubled
    "ッバー": "bbaa",
    "ッベー": "bbee",
    "ッビー": "bbii",
    "ッボー": "bboo",
    "ッブー": "bbuu",
    "ッパー": "ppaa",
    "ッペー": "ppee",
    "ッピー": "ppii",
    "ッポー": "ppoo",
    "ップー": "ppuu",
    "ッケー": "kkee",
    "ッキー": "kkii",
    "ッコー": "kkoo",
    "ックー": "kkuu",
    "ッカー": "kkaa",
    "ッガー": "ggaa",
    "ッゲー": "ggee",
    "ッギー": "ggii",
    "ッゴー": "ggoo",
    "ッグー": "gguu",
    "ッマー": "maa",
    "ッメー": "mee",
    "ッミー": "mii",
    "ッモー": "moo",
    "ッムー": "muu",
    "ッナー": "nnaa",
    "ッネー": "nnee",
    "ッニー": "nnii",
    "ッノー": "nnoo",
    "ッヌー": "nnuu",
    "ッラー": "rraa",
    "ッレー": "rree",
    "ッリー": "rrii",
    "ッロー": "rroo",
    "ッルー": "rruu",
    "ッサー": "ssaa",
    "ッセー": "ssee",
    "ッシー": "sshii",
    "ッソー": "ssoo",
    "ッスー": "ssuu",
    "ッザー": "zzaa",
    "ッゼー": "zzee",
    "ッジー": "jjii",
    "ッゾー": "zzoo",
    "ッズー": "zzuu",
    "ッター": "ttaa",
    "ッテー": "ttee",
    "ッチー": "chii",
    "ットー": "ttoo",
    "ッツー": "ttsuu",
    "ッダー": "ddaa",
    "ッデー": "ddee",
    "ッヂー": "ddii",
    "ッドー": "ddoo",
    "ッヅー": "dduu",

    # Two-kana syllables
    "ファ": "fa",
    "フォ": "fo",
    "フゥ": "fu",
    "フャ": "fa",
    "フェ": "fe",
    "フィ": "fi",
    "フョ": "fo",
    "フュ": "fu",
    "ヒャ": "hya",
    "ヒェ": "hye",
    "ヒィ": "hyi",
    "ヒョ": "hyo",
    "ヒュ": "hyu",
    "ビャ": "bya",
    "ビェ": "bye",
    "ビィ": "byi",
    "ビョ": "byo",
    "ビュ": "byu",
    "ピャ": "pya",
    "ピェ": "pye",
    "ピィ": "pyi",
    "ピョ": "pyo",
    "ピュ": "pyu",
    "キャ": "kya",
    "キェ": "kye",
    "キィ": "kyi",
    "キョ": "kyo",
    "キュ": "kyu",
    "ギャ": "gya",
    "ギェ": "gye",
    "ギィ": "gyi",
    "ギョ": "gyo",
    "ギュ": "gyu",
    "ミャ": "mya",
    "ミェ": "mye",
    "ミィ": "myi",
    "ミョ": "myo",
    "ミュ": "myu",
    "ニャ": "nya",
    "ニェ": "nye",
    "ニィ": "nyi",
    "ニョ": "nyo",
    "ニュ": "nyu",
    "リャ": "rya",
    "リェ": "rye",
    "リィ": "ryi",
    "リョ": "ryo",
    "リュ": "ryu",
    "シャ": "sha",
    "シェ": "she",
    "ショ": "sho",
    "シュ": "shu",
    "ジャ": "ja",
    "ジェ": "je",
    "ジョ": "jo",
    "ジュ": "ju",
    "スァ": "swa",
    "スェ": "swe",
    "スィ": "swi",
    "スォ": "swo",
    "スゥ": "swu",
    "デァ": "da",
    "デェ": "de",
    "ディ": "di",
    "デォ": "do",
    "デゥ": "du",
    "チャ": "cha",
    "チェ": "che",
    "チョ": "cho",
    "チュ": "chu",
    "ツャ": "tsa",
    "ツェ": "tse",
    "ツィ": "tsi",
    "ツョ": "tso",
    "トァ": "twa",
    "トェ": "twe",
    "トィ": "twi",
    "トォ": "two",
    "トゥ": "twu",
    "ドァ": "dwa",
    "ドェ": "dwe",
    "ドィ": "dwi",
    "ドォ": "dwo",
    "ドゥ": "dwu",
    "ウァ": "wha",
    "ウォ": "who",
    "ウゥ": "whu",
    "ヴャ": "vya",
    "ヴョ": "vyo",
    "ヴュ": "vyu",
    "ヴァ": "va",
    "ヴェ": "ve",
    "ヴィ": "vi",
    "ヴォ": "vo",
    "ヴ": "vu",
    "ウェ": "we",
    "ウィ": "wi",
    "イェ": "ye",
    "ティ": "ti",
    "ヂィ": "di",

    # Two-kana syllables with a doubled vowel
    "アー": "aa",
    "エー": "ee",
    "イー": "ii",
    "オー": "oo",
    "ウー": "uu",
    "ダー": "daa",
    "デー": "dee",
    "ヂー": "dii",
    "ドー": "doo",
    "ヅー": "duu",
    "ハー": "haa",
    "ヘー": "hee",
    "ヒー": "hii",
    "ホー": "hoo",
    "フー": "fuu",
    "バー": "baa",
    "ベー": "bee",
    "ビー": "bii",
    "ボー": "boo",
    "ブー": "buu",
    "パー": "paa",
    "ペー": "pee",
    "ピー": "pii",
    "ポー": "poo",
    "プー": "puu",
    "ケー": "kee",
    "キー": "kii",
    "コー": "koo",
    "クー": "kuu",
    "カー": "kaa",
    "ガー": "gaa",
    "ゲー": "gee",
    "ギー": "gii",
    "ゴー": "goo",
    "グー": "guu",
    "マー": "maa",
    "メー": "mee",
    "ミー": "mii",
    "モー": "moo",
    "ムー": "muu",
    "ナー": "naa",
    "ネー": "nee",
    "ニー": "nii",
    "ノー": "noo",
    "ヌー": "nuu",
    "ラー": "raa",
    "レー": "ree",
    "リー": "rii",
    "ロー": "roo",
    "ルー": "ruu",
    "サー": "saa",
    "セー": "see",
    "シー": "shii",
    "ソー": "soo",
    "スー": "suu",
    "ザー": "zaa",
    "ゼー": "zee",
    "ジー": "jii",
    "ゾー": "zoo",
    "ズー": "zuu",
    "ター": "taa",
    "テー": "tee",
    "チー": "chii",
    "トー": "too",
    "ツー": "tsuu",
    "ワー": "waa",
    "ヲー": "woo",
    "ヤー": "yaa",
    "ヨー": "yoo",
    "ユー": "yuu",
    "ヵー": "kaa",
    "ヶー": "kee",
    # Obsolete kana
    "ヱー": "wee",
    "ヰー": "wii",

    # Syllabic katakana n
    "ンア": "n_a",
    "ンエ": "n_e",
    "ンイ": "n_i",
    "ンオ": "n_o",
    "ンウ": "n_u",
    "ンヤ": "n_ya",
    "ンヨ": "n_yo",
    "ンユ": "n_yu",

    # Two-kana syllables with a doubled consonant
    "ッバ": "bba",
    "ッベ": "bbe",
    "ッビ": "bbi",
    "ッボ": "bbo",
    "ッブ": "bbu",
    "ッパ": "ppa",
    "ッペ": "ppe",
    "ッピ": "ppi",
    "ッポ": "ppo",
    "ップ": "ppu",
    "ッケ": "kke",
    "ッキ": "kki",
    "ッコ": "kko",
    "ック": "kku",
    "ッカ": "kka",
    "ッガ": "gga",
    "ッゲ": "gge",
    "ッギ": "ggi",
    "ッゴ": "ggo",
    "ッグ": "ggu",
    "ッマ": "ma",
    "ッメ": "me",
    "ッミ": "mi",
    "ッモ": "mo",
    "ッム": "mu",
    "ッナ": "nna",
    "ッネ": "nne",
    "ッニ": "nni",
    "ッノ": "nno",
    "ッヌ": "nnu",
    "ッラ": "rra",
    "ッレ": "rre",
    "ッリ": "rri",
    "ッロ": "rro",
    "ッル": "rru",
    "ッサ": "ssa",
    "ッセ": "sse",
    "ッシ": "sshi",
    "ッソ": "sso",
    "ッス": "ssu",
    "ッザ": "zza",
    "ッゼ": "zze",
    "ッジ": "jji",
    "ッゾ": "zzo",
    "ッズ": "zzu",
    "ッタ": "tta",
    "ッテ": "tte",
    "ッチ": "cchi",
    "ット": "tto",
    "ッツ": "ttsu",
    "ッダ": "dda",
    "ッデ": "dde",
    "ッヂ": "ddi",
    "ッド": "ddo",
    "ッヅ": "ddu",

    # Single kana
    "ア": "a",
    "エ": "e",
    "イ": "i",
    "オ": "o",
    "ウ": "u",
    "ン": "n",
    "ハ": "ha",
    "ヘ": "he",
    "ヒ": "hi",
    "ホ": "ho",
    "フ": "fu",
    "バ": "ba",
    "ベ": "be",
    "ビ": "bi",
    "ボ": "bo",
    "ブ": "bu",
    "パ": "pa",
    "ペ": "pe",
    "ピ": "pi",
    "ポ": "po",
    "プ": "pu",
    "ケ": "ke",
    "キ": "ki",
    "コ": "ko",
    "ク": "ku",
    "カ": "ka",
    "ガ": "ga",
    "ゲ": "ge",
    "ギ": "gi",
    "ゴ": "go",
    "グ": "gu",
    "マ": "ma",
    "メ": "me",
    "ミ": "mi",
    "モ": "mo",
    "ム": "mu",
    "ナ": "na",
    "ネ": "ne",
    "ニ": "ni",
    "ノ": "no",
    "ヌ": "nu",
    "ラ": "ra",
    "レ": "re",
    "リ": "ri",
    "ロ": "ro",
    "ル": "ru",
    "サ": "sa",
    "セ": "se",
    "シ": "shi",
    "ソ": "so",
    "ス": "su",
    "ザ": "za",
    "ゼ": "ze",
    "ジ": "ji",
    "ゾ": "zo",
    "ズ": "zu",
    "タ": "ta",
    "テ": "te",
    "チ": "chi",
    "ト": "to",
    "ツ": "tsu",
    "ダ": "da",
    "デ": "de",
    "ヂ": "di",
    "ド": "do",
    "ヅ": "du",
    "ワ": "wa",
    "ヲ": "wo",
    "ヤ": "ya",
    "ヨ": "yo",
    "ユ": "yu",
    "ヵ": "ka",
    "ヶ": "ke",
    # Obsolete kana
    "ヱ": "we",
    "ヰ": "wi",

    # Small kana left over after the cluster rules
    "ァ": "a",
    "ェ": "e",
    "ィ": "i",
    "ォ": "o",
    "ゥ": "u",
    "ャ": "ya",
    "ョ": "yo",
    "ュ": "yu",

    # Japanese punctuation
    "・": "_",
    "、": "_",
    "ー": "_",

    # Greek letters without a direct Latin look-alike
    "Γ": "G",
    "Δ": "E",
    "Θ": "Th",
    "Λ": "L",
    "Ξ": "X",
    "Π": "P",
    "Σ": "S",
    "Φ": "F",
    "Ψ": "Ps",
    "γ": "g",
    "δ": "e",
    "θ": "th",
    "λ": "l",
    "ξ": "x",
    "π": "p",
    "σ": "s",
    "φ": "f",
    "ψ": "ps",

    # Thai
    "ก": "k",
    "ข": "kh",
    "ฃ": "kh",
    "ค": "kh",
    "ฅ": "kh",
    "ฆ": "kh",
    "ง": "ng",
    "จ": "ch",
    "ฉ": "ch",
    "ช": "ch",
    "ซ": "s",
    "ฌ": "ch",
    "ญ": "y",
    "ฎ": "d",
    "ฏ": "t",
    "ฐ": "th",
    "ฑ": "d",
    "ฒ": "th",
    "ณ": "n",
    "ด": "d",
    "ต": "t",
    "ถ": "th",
    "ท": "th",
    "ธ": "th",
    "น": "n",
    "บ": "b",
    "ป": "p",
    "ผ": "ph",
    "ฝ": "f",
    "พ": "ph",
    "ฟ": "f",
    "ภ": "ph",
    "ม": "m",
    "ย": "y",
    "ร": "r",
    "ฤ": "rue",
    "ฤๅ": "rue",
    "ล": "l",
    "ฦ": "lue",
    "ฦๅ": "lue",
    "ว": "w",
    "ศ": "s",
    "ษ": "s",
    "ส": "s",
    "ห": "h",
    "ฬ": "l",
    "ฮ": "h",
    "ะ": "a",
    "\u0e31": "a",
    "รร": "a",
    "า": "a",
    "ๅ": "a",
    "ำ": "am",
    "\u0e4dา": "am",
    "\u0e34": "i",
    "\u0e36": "ue",
    "\u0e35": "ue",
    "\u0e38": "u",
    "\u0e39": "u",
    "เ": "e",
    "แ": "ae",
    "โ": "o",
    "อ": "o",
    "\u0e35ยะ": "ia",
    "\u0e35ย": "ia",
    "\u0e37อะ": "uea",
    "\u0e37อ": "uea",
    "\u0e31วะ": "ua",
    "\u0e31ว": "ua",
    "ใ": "ai",
    "ไ": "ai",
    "\u0e31ย": "ai",
    "าย": "ai",
    "าว": "ao",
    "\u0e38ย": "ui",
    "อย": "oi",
    "\u0e37อย": "ueai",
    "วย": "uai",
    "\u0e34ว": "io",
    "\u0e47ว": "eo",
    "\u0e35ยว": "iao",
    "\u0e48": "",
    "\u0e49": "",
    "\u0e4a": "",
    "\u0e4b": "",
    "\u0e47": "",
    "\u0e4c": "",
    "\u0e4e": "",
    "\u0e4d": "",
    "\u0e3a": "",
    "ๆ": "2",
    "๏": "o",
    "ฯ": "-",
    "๚": "-",
    "๛": "-",
    "๐": "0",
    "๑": "1",
    "๒": "2",
    "๓": "3",
    "๔": "4",
    "๕": "5",
    "๖": "6",
    "๗": "7",
    "๘": "8",
    "๙": "9",

    # Korean
    "ㄱ": "k",
    "ㅋ": "kh",
    "ㄲ": "kk",
    "ㄷ": "t",
    "ㅌ": "th",
    "ㄸ": "tt",
    "ㅂ": "p",
    "ㅍ": "ph",
    "ㅃ": "pp",
    "ㅈ": "c",
    "ㅊ": "ch",
    "ㅉ": "cc",
    "ㅅ": "s",
    "ㅆ": "ss",
    "ㅎ": "h",
    "ㅇ": "ng",
    "ㄴ": "n",
    "ㄹ": "l",
    "ㅁ": "m",
    "ㅏ": "a",
    "ㅓ": "e",
    "ㅗ": "o",
    "ㅜ": "wu",
    "ㅡ": "u",
    "ㅣ": "i",
    "ㅐ": "ay",
    "ㅔ": "ey",
    "ㅚ": "oy",
    "ㅘ": "wa",
    "ㅝ": "we",
    "ㅟ": "wi",
    "ㅙ": "way",
    "ㅞ": "wey",
    "ㅢ": "uy",
    "ㅑ": "ya",
    "ㅕ": "ye",
    "ㅛ": "oy",
    "ㅠ": "yu",
    "ㅒ": "yay",
    "ㅖ": "yey",
}
