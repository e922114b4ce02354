"""Default sign, source and district lists injected when the YAML omits them."""

from collector.config.schema import CopywritingSource, SignConfig

DEFAULT_SIGNS: list[SignConfig] = [
    SignConfig(key="aries", display_name="白羊座"),
    SignConfig(key="taurus", display_name="金牛座"),
    SignConfig(key="gemini", display_name="雙子座"),
    SignConfig(key="cancer", display_name="巨蟹座"),
    SignConfig(key="leo", display_name="獅子座"),
    SignConfig(key="virgo", display_name="處女座"),
    SignConfig(key="libra", display_name="天秤座"),
    SignConfig(key="scorpio", display_name="天蠍座"),
    SignConfig(key="sagittarius", display_name="射手座"),
    SignConfig(key="capricorn", display_name="摩羯座"),
    SignConfig(key="aquarius", display_name="水瓶座"),
    SignConfig(key="pisces", display_name="雙魚座"),
]

DEFAULT_COPYWRITING_SOURCES: list[CopywritingSource] = [
    CopywritingSource(
        key="love",
        name="愛情文案",
        url="https://v.api.aa1.cn/api/api-wenan-aiqing/index.php?type=json",
        response_key="text",
        filename="love-copywriting.json",
    ),
    CopywritingSource(
        key="funny",
        name="搞笑文案",
        url="https://zj.v.api.aa1.cn/api/wenan-gaoxiao/?type=json",
        response_key="msg",
        filename="funny-copywriting.json",
    ),
    CopywritingSource(
        key="romantic",
        name="騷話文案",
        url="https://v.api.aa1.cn/api/api-saohua/index.php?type=json",
        response_key="saohua",
        filename="romantic-copywriting.json",
    ),
]

TAIPEI_DISTRICTS: list[str] = [
    "中正區",
    "大同區",
    "中山區",
    "松山區",
    "大安區",
    "萬華區",
    "信義區",
    "士林區",
    "北投區",
    "內湖區",
    "南港區",
    "文山區",
]
