"""Static character sets shared by the normalizer."""

# Punctuation, symbols, box drawing, dingbats, invisible and full-width forms
# treated as "special" by strip_specials(). The control characters
# 0x00-0x19 are added separately. Not included: "_", ":", ".", "-" and
# "*".
SPECIAL_CHARS = (
    "\x1a\x1b\x1c\x1d\x1e\x1f !\"#$%&'()+,/;<=>?@[\\]^`{|}~\x7f\x80"
    "\x81\x82\x83\x84\x85\x86\x87\x88\x89\x8a\x8b\x8c\x8d\x8e\x8f"
    "\x90\x91\x92\x93\x94\x95\x96\x97\x98\x99\x9a\x9b\x9c\x9d\x9e\x9f"
    "\xa0¡¢£¤¥¦§¨©ª«¬\xad®¯°±²³´µ¶·¸¹º»¼½¾¿×÷ˇ˘˙˚˛˜˝\u0300\u0301\u0303"
    "\u0309\u0323΄΅·ϖ\u05b0\u05b1\u05b2\u05b3\u05b4\u05b5\u05b6\u05b7"
    "\u05b8\u05b9\u05bb\u05bc\u05bd־\u05bf\u05c1\u05c2׃׳״،؛؟ـ\u064b"
    "\u064c\u064d\u064e\u064f\u0650\u0651\u0652٪฿\u200c\u200d\u200e"
    "\u200f–—―‗‘’‚“”†‡•…‰′″‹›⁄₧₪₫€№℘™Ωℵ←↑→↓↔↕↵⇐⇑⇒⇓⇔∀∂∃∅∆∇∈∉∋∏∑−∕∗"
    "∙√∝∞∠∧∨∪∫∴∼≅≈≠≡≤≥⊂⊃⊄⊆⊇⊕⊗⊥⋅⌐⌠⌡〈〉⑩─┌┐└┘├┤┬┴┼═║╒╓╔╕╖╗╘╙╚╛╜╝╞╟╠╡"
    "╢╣╤╥╦╧╨╩╪╫╬▀▄█▌▐░▒▓■▲▼◆◊●★☎☛☞♠♣♥♦✁✂✃✄✆✇✈✉✌✍✎✏✐✑✒✓✔✕✗✘✙✚✛✜✝✞✟"
    "✠✡✢✣✤✥✦✧✩✪✫✬✭✮✯✰✱✲✳✴✵✶✷✸✹✺✻✼✽✾✿❀❁❂❃❄❅❆❇❈❉❊❋❏❐❑❒❖❘❙❚❛❜❝❞❡❢❣❤❥"
    "❦❧❿➉➓➔➘➙➚➜➝➞➟➠➡➢➣➤➥➦➧➨➩➪➫➬➭➮➯➱➲➳➴➵➶➷➸➹➺➻➼➽➾\u3000、。〃〈〉《》「」『』"
    "【】〒〔〕〖〗〘〙〚〛〶\uf6d9\uf6da\uf6db\uf8d7\uf8d8\uf8d9\uf8da\uf8db"
    "\uf8dc\uf8dd\uf8de\uf8df\uf8e0\uf8e1\uf8e2\uf8e3\uf8e4\uf8e5"
    "\uf8e7\uf8e8\uf8e9\uf8ea\uf8eb\uf8ec\uf8ed\uf8ee\uf8ef\uf8f0"
    "\uf8f1\uf8f2\uf8f3\uf8f4\uf8f5\uf8f6\uf8f7\uf8f8\uf8f9\uf8fa"
    "\uf8fb\uf8fc\uf8fd\uf8feﹼﹽ！＂＃＄％＆＇（）＊＋，－．／：；＜＝＞？＠［＼］＾｀｛｜｝～｟｠｡"
    "｢｣､･￠￡￢￣￤￥￦￨￩￪￫￬￭￮𝛼𝛽𝛾𝛿𝜀𝜁𝜂𝜃𝜄𝜅𝜆𝜇𝜈𝜉𝜊𝜋𝜌𝜍𝜎𝜏𝜐𝜑𝜒𝜓𝜔𝜕𝜖𝜗𝜘𝜙𝜚𝜛\u2007\u202f"
    "\u2060\ufeff"
)

# slugify() drops the first set and collapses runs of the second set, and of
# whitespace, into "-".
SLUG_DROP_CHARS = ".\"'"
SLUG_SEPARATOR_CHARS = "/&-?"
