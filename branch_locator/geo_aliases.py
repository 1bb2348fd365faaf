"""
Geographic alias dictionary and query expansion.

Keys are place, street or landmark names customers type; values are the
region keyword found in the name or address of the branch that serves them.
Both sides are already normalized (lower-case, no diacritics).
"""
from types import MappingProxyType
from typing import Mapping, Tuple

from loguru import logger

from branch_locator.models import AliasHit

# Street names that are also province names. Scored at reduced weight.
CONFUSING_WORDS = frozenset({
    "hue", "ho chi minh", "thai binh", "nam dinh", "hung yen", "cao bang", "lang son",
})

_GEO_ALIASES = {
    # ── Ho Chi Minh City ─────────────────────────────────────────────────────
    "sai gon": "ho chi minh",
    "thu duc": "ho chi minh",
    "go vap": "ho chi minh",
    "binh tan": "ho chi minh",
    "binh chanh": "ho chi minh",
    "hoc mon": "ho chi minh",
    "cu chi": "ho chi minh",
    "nha be": "nha be",

    # Binh Thanh branch
    "binh thanh": "binh thanh",
    "hang xanh": "binh thanh",
    "thanh da": "binh thanh",
    "dien bien phu": "binh thanh",
    "xo viet nghe tinh": "binh thanh",
    "nguyen xi": "binh thanh",
    "pham van dong": "binh thanh",
    "ung van khiem": "binh thanh",
    "le quang dinh": "binh thanh",
    "no trang long": "binh thanh",

    # Phu Nhuan branch
    "phu nhuan": "phu nhuan",
    "phan xich long": "phu nhuan",
    "nguyen van troi": "phu nhuan",
    "hoang van thu": "phu nhuan",
    "le van sy": "phu nhuan",
    "tran huy lieu": "phu nhuan",
    "nguyen kiem": "phu nhuan",

    # District 7 branch
    "quan 7": "quan 7",
    "phu my hung": "quan 7",
    "tan thuan": "quan 7",
    "nguyen van linh": "quan 7",
    "nguyen thi thap": "quan 7",
    "huynh tan phat": "quan 7",
    "le van luong": "quan 7",
    "him lam": "quan 7",

    # District 8 branch
    "quan 8": "quan 8",
    "pham the hien": "quan 8",
    "ta quang buu": "quan 8",
    "au duong lan": "quan 8",
    "duong ba trac": "quan 8",
    "hung phu": "quan 8",

    # Tan Phu branch
    "tan phu": "tan phu",
    "tan son nhi": "tan phu",
    "tay thanh": "tan phu",
    "luy ban bich": "tan phu",
    "tan ky tan quy": "tan phu",
    "vuon lai": "tan phu",
    "duong hoa binh": "tan phu",  # not "hoa binh", that is a province
    "le trong tan": "tan phu",

    # Remaining districts
    "quan 1": "ho chi minh", "quan 2": "ho chi minh", "quan 3": "ho chi minh",
    "quan 4": "ho chi minh", "quan 5": "ho chi minh", "quan 6": "ho chi minh",
    "quan 9": "ho chi minh", "quan 10": "ho chi minh", "quan 11": "ho chi minh",
    "quan 12": "ho chi minh",
    "nguyen hue": "ho chi minh", "bui vien": "ho chi minh", "ben thanh": "ho chi minh",

    # ── Binh Duong ───────────────────────────────────────────────────────────
    "di an": "binh duong",
    "thuan an": "binh duong",
    "ben cat": "binh duong",
    "tan uyen": "binh duong",
    "bau bang": "binh duong",
    "thu dau mot": "thu dau mot",
    "dai lo binh duong": "thu dau mot",
    "thanh pho moi": "thu dau mot",

    # ── Dong Nai ─────────────────────────────────────────────────────────────
    "bien hoa": "bien hoa",
    "nga 3 vung tau": "bien hoa",
    "amata": "bien hoa",
    "tam hiep": "bien hoa",
    "tan mai": "bien hoa",
    "trang bom": "bien hoa",
    "long khanh": "long khanh",
    "dinh quan": "dinh quan",
    "la nga": "dinh quan",
    "tan phu dong nai": "dinh quan",
    "long thanh": "bien hoa",
    "nhon trach": "bien hoa",

    # ── Vung Tau ─────────────────────────────────────────────────────────────
    "vung tau": "vung tau",
    "ba ria": "vung tau",
    "phu my": "vung tau",
    "long hai": "vung tau",
    "chau duc": "vung tau",
    "xuyen moc": "vung tau",
    "bai truoc": "vung tau", "bai sau": "vung tau", "thuy van": "vung tau",

    # ── Tay Ninh ─────────────────────────────────────────────────────────────
    "tay ninh": "tay ninh",
    "hoa thanh": "tay ninh",
    "trang bang": "tay ninh",
    "go dau": "tay ninh",
    "moc bai": "moc bai",
    "ben cau": "moc bai",
    "tan chau": "tan chau",

    # ── Mekong Delta ─────────────────────────────────────────────────────────
    "can tho": "can tho",
    "ninh kieu": "can tho", "cai rang": "can tho", "binh thuy": "can tho", "o mon": "can tho",
    "ben ninh kieu": "can tho", "dai lo hoa binh": "can tho",

    "tien giang": "my tho",
    "my tho": "my tho",
    "cai lay": "cai lay",
    "cai be": "cai lay",
    "cho gao": "my tho",
    "go cong": "tien giang",

    "ben tre": "ben tre", "chau thanh ben tre": "ben tre", "mo cay": "ben tre",
    "vinh long": "vinh long",
    "tra vinh": "tra vinh",
    "dong thap": "cao lanh",
    "cao lanh": "cao lanh",
    "sa dec": "sa dec",
    "hong ngu": "hong ngu",
    "an giang": "long xuyen",
    "long xuyen": "long xuyen",
    "chau doc": "long xuyen",
    "kien giang": "rach gia",
    "rach gia": "rach gia",
    "ha tien": "rach gia",
    "phu quoc": "rach gia",
    "ca mau": "ca mau", "nam can": "ca mau",
    "bac lieu": "ca mau",
    "soc trang": "soc trang",
    "hau giang": "vi thanh",
    "vi thanh": "vi thanh",
    "nga bay": "vi thanh",

    # ── Da Nang ──────────────────────────────────────────────────────────────
    "da nang": "da nang",
    "hai chau": "da nang",
    "thanh khe": "lien chieu",
    "lien chieu": "lien chieu",
    "son tra": "da nang",
    "ngu hanh son": "da nang",
    "cam le": "cam le",
    "hoa vang": "hoa vang",
    "hoa xuan": "hoa xuan",
    "nguyen sinh sac": "lien chieu", "hoang thi loan": "lien chieu",
    "ton duc thang": "lien chieu", "nguyen luong bang": "lien chieu",
    "au co": "lien chieu", "kinh duong vuong": "lien chieu",
    "truong chinh": "cam le", "cach mang thang 8": "cam le",
    "thang long": "cam le", "nguyen huu tho": "cam le",
    "vo chi cong": "hoa xuan", "pham hung": "cam le",

    # ── Central provinces ────────────────────────────────────────────────────
    "thua thien hue": "hue",
    "hue": "hue",
    "vi da": "hue", "kim long": "hue", "phu hoi": "hue", "xuan phu": "hue",

    "quang nam": "tam ky",
    "tam ky": "tam ky",
    "hoi an": "tam ky",
    "dien ban": "tam ky",

    "quang ngai": "quang ngai",
    "binh dinh": "quy nhon",
    "quy nhon": "quy nhon",
    "an nhon": "quy nhon",

    "phu yen": "tuy hoa",
    "tuy hoa": "tuy hoa",

    "khanh hoa": "nha trang",
    "nha trang": "nha trang",
    "cam ranh": "cam ranh",
    "dien khanh": "nha trang",
    "tran phu nha trang": "nha trang",

    "ninh thuan": "phan rang",
    "phan rang": "phan rang",
    "thap cham": "phan rang",

    "binh thuan": "phan thiet",
    "phan thiet": "phan thiet",
    "mui ne": "phan thiet",
    "lagi": "phan thiet",

    "quang tri": "dong ha",
    "dong ha": "dong ha",

    "quang binh": "dong ha",
    "dong hoi": "dong ha",

    "nghe an": "vinh",
    "vinh": "vinh",
    "cua lo": "vinh",

    "thanh hoa": "thanh hoa",
    "sam son": "thanh hoa",

    # ── Central Highlands ────────────────────────────────────────────────────
    "lam dong": "da lat",
    "da lat": "da lat",
    "bao loc": "bao loc",
    "duc trong": "da lat",
    "lam ha": "da lat",
    "ho xuan huong": "da lat",

    "dak lak": "buon ma thuot",
    "buon ma thuot": "buon ma thuot",
    "bmt": "buon ma thuot",
    "nga sau": "buon ma thuot",

    "gia lai": "pleiku",
    "pleiku": "pleiku",

    "kon tum": "kon tum",
    "dak nong": "buon ma thuot",

    # ── Ha Noi ───────────────────────────────────────────────────────────────
    "ha noi": "ha noi",
    "cau giay": "ha noi",
    "thanh xuan": "ha noi",
    "dong da": "ha noi",
    "ba dinh": "ha noi",
    "hoan kiem": "ha noi",
    "hai ba trung": "ha noi",
    "hoang mai": "ha noi",
    "long bien": "ha noi",
    "tay ho": "ha noi",
    "bac tu liem": "ha noi", "nam tu liem": "ha noi",
    "ha dong": "ha noi",
    "son tay": "ha noi",
    # major streets
    "lang ha": "ha noi", "nguyen chi thanh": "ha noi", "xuan thuy": "ha noi",
    "ho tung mau": "ha noi", "kim ma": "ha noi", "xa dan": "ha noi", "pho hue": "ha noi",

    # ── Hai Phong ────────────────────────────────────────────────────────────
    "hai phong": "hai phong",
    "hong bang": "hai phong", "ngo quyen": "hai phong", "le chan": "hai phong",
    "hai an": "hai phong", "kien an": "hai phong", "do son": "hai phong",
    "thuy nguyen": "hai phong",
    "lach tray": "hai phong", "le hong phong hai phong": "hai phong",

    # ── Northern provinces ───────────────────────────────────────────────────
    "quang ninh": "ha long",
    "ha long": "ha long",
    "bai chay": "ha long", "hon gai": "ha long",
    "cam pha": "ha long",
    "uong bi": "uong bi",
    "mong cai": "mong cai",

    "hai duong": "hai duong",
    "hung yen": "hung yen",
    "ecopark": "hung yen",

    "bac ninh": "bac ninh",
    "tu son": "tu son",
    "yen phong": "bac ninh",

    "vinh phuc": "vinh yen",
    "vinh yen": "vinh yen",
    "phuc yen": "vinh yen",
    "tam dao": "vinh yen",

    "thai nguyen": "thai nguyen",
    "song cong": "thai nguyen",

    "bac giang": "bac ninh",

    "thai binh": "thai binh",
    "nam dinh": "nam dinh",
    "ninh binh": "hoa lu",
    "hoa lu": "hoa lu",
    "tam diep": "hoa lu",

    "lao cai": "lao cai",
    "sapa": "lao cai",

    "yen bai": "yen bai",
    "tuyen quang": "tuyen quang",
    "son la": "son la",
    "moc chau": "son la",
    "lang son": "lang son",
    "hoa binh": "hoa binh",
    "ha nam": "nam dinh",
    "phu tho": "vinh yen",
}

GEO_ALIASES: Mapping[str, str] = MappingProxyType(_GEO_ALIASES)


def _keys_by_length(aliases: Mapping[str, str]) -> Tuple[str, ...]:
    # sorted() is stable, so equal-length keys keep table order
    return tuple(sorted(aliases, key=len, reverse=True))


_SORTED_KEYS = _keys_by_length(GEO_ALIASES)


def expand_aliases(query: str, aliases: Mapping[str, str] = GEO_ALIASES) -> AliasHit:
    """
    Append the region keyword of the most specific alias found in a normalized query.

    Keys are tried longest first and the first key contained in the query wins,
    so a named street outranks the province it lies in. At most one alias is
    applied; the original text is kept so its tokens still score.

    Args:
        query (str): Normalized customer address.
        aliases (Mapping[str, str]): Alias table, defaults to GEO_ALIASES.

    Returns:
        AliasHit: Expanded query plus the matched value and key (empty on miss).
                  Example: 'go cong tien giang' → value 'my tho', key 'tien giang'
    """
    keys = _SORTED_KEYS if aliases is GEO_ALIASES else _keys_by_length(aliases)
    for key in keys:
        if key in query:
            value = aliases[key]
            logger.debug(f"🗺️ Alias '{key}' → '{value}'")
            return AliasHit(expanded_query=f"{query} {value}", alias_value=value, alias_key=key)
    return AliasHit(expanded_query=query)
