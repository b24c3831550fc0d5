"""
Word lists driving heuristic candidate discovery and noise filtering.

Kept separate from the matching code so the vocabularies can be reviewed
(and extended) without touching regex logic. Lists mix Chinese and English
because LLM answers in both languages are analyzed with one configuration.
"""

# Filler phrases stripped (repeatedly) from the front of a candidate,
# e.g. "目前市场上小米" -> "小米"
FILLER_PREFIXES: tuple[str, ...] = (
    "目前",
    "市场上",
    "市面上",
    "其中",
    "包括",
    "例如",
    "主要",
    "特别是",
    "比如",
    "像是",
)

# Candidates starting with one of these are sentences, not names.
# Matched case-insensitively for the Latin entries.
PRONOUN_PREFIXES: tuple[str, ...] = (
    "它们",
    "他们",
    "我们",
    "这些",
    "那些",
    "It",
    "They",
    "We",
    "These",
    "Those",
)

# Exact-match stopwords: section labels, table headers and product attributes
NOISE_WORDS: frozenset[str] = frozenset(
    {
        "Answer",
        "回答",
        "综上",
        "总结",
        "Rank",
        "Brand",
        "Name",
        "Score",
        "Rating",
        "Note",
        "注意",
        "提示",
        "参考资料",
        "参考文献",
        "Sources",
        "References",
        "功能",
        "市场表现",
        "评测得分",
        "续航",
        "外观",
        "价格",
        "性价比",
        "特点",
        "优势",
        "劣势",
        "优点",
        "缺点",
        "代表产品",
        "配置",
        "生态",
    }
)

# Case-insensitive substrings marking links, citations and report titles
NOISE_FRAGMENTS: tuple[str, ...] = (
    "http",
    "www.",
    ".com",
    ".cn",
    ".org",
    "报告",
    "新闻",
    "链接",
    "Report",
    "News",
    "Link",
    "品控",
)

# Descriptive words that, glued directly after a leading name run, mark a
# "BrandDescription" line such as "小米高性价比，适合学生。"
DESCRIPTION_TRIGGERS: tuple[str, ...] = (
    "高性价比",
    "主打",
    "户外",
    "表现",
    "优势",
    "劣势",
    "特点",
    "拥有",
    "具备",
    "采用",
    "搭载",
    "支持",
    "销量",
    "市场",
    "排名",
    "配置",
    "价格",
)

# Suffixes of institutional entities (exhibition centers, museums, expos)
INSTITUTION_SUFFIXES: tuple[str, ...] = ("中心", "博览会", "馆", "展")

# Single-character particles that leak onto the last item of an enumeration
TRAILING_PARTICLES = "是在有的等"
