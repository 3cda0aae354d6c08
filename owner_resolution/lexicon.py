"""
Owner name lexicon.

Static reference tables used to clean and classify scraped owner names.
Everything here is data: extend a table for a new jurisdiction instead of
touching the parsing code. All entries are upper-case with periods removed,
which is the form normalize_token() produces.
"""

import re
import unicodedata

# Legal-entity suffixes and organisational words
ENTITY_SUFFIXES = {
    "LLC", "LC", "INC", "INCORPORATED", "CORP", "CORPORATION", "CO",
    "COMPANY", "LTD", "LIMITED", "LP", "LLP", "LLLP", "PLC", "PLLC",
    "PC", "PA", "NA", "FSB",
}

ORGANIZATION_WORDS = {
    "TRUST", "BANK", "ASSOCIATION", "ASSN", "ASSOC", "ASSOCIATES",
    "FOUNDATION", "ALLIANCE", "SOLUTIONS", "SERVICES", "HOLDINGS", "GROUP",
    "PARTNERS", "PARTNERSHIP", "PROPERTIES", "PROPERTY", "REALTY",
    "MANAGEMENT", "INVESTMENTS", "INVESTMENT", "FUND", "DEVELOPMENT",
    "ENTERPRISE", "ENTERPRISES", "VENTURES", "CAPITAL", "MORTGAGE",
    "FINANCIAL", "LENDING", "HOMES", "BUILDERS", "CONSTRUCTION", "ESTATE",
    "ESTATES", "CONDOMINIUM", "HOA", "HOMEOWNERS", "CLUB", "COOPERATIVE",
    "MUTUAL", "CREDIT", "FEDERAL", "NATIONAL",
}

RELIGIOUS_AND_CIVIC_WORDS = {
    "CHURCH", "MINISTRIES", "MINISTRY", "TEMPLE", "SYNAGOGUE", "MOSQUE",
    "DIOCESE", "SCHOOL", "ACADEMY", "UNIVERSITY", "COLLEGE", "HOSPITAL",
    "CEMETERY", "CONSERVANCY",
}

GOVERNMENT_WORDS = {
    "CITY", "COUNTY", "STATE", "TOWN", "VILLAGE", "MUNICIPAL", "DISTRICT",
    "AUTHORITY", "DEPARTMENT", "DEPT", "BOARD", "COMMISSION", "AGENCY",
    "GOVERNMENT", "USA", "TIITF",
}

COMPANY_KEYWORDS = (
    ENTITY_SUFFIXES
    | ORGANIZATION_WORDS
    | RELIGIOUS_AND_CIVIC_WORDS
    | GOVERNMENT_WORDS
)

# Multi-word organisational phrases (matched on the whole upper-cased text)
COMPANY_PHRASES = (
    "UNITED STATES",
    "CREDIT UNION",
    "NATIONAL ASSOCIATION",
    "HOUSING AUTHORITY",
    "BOARD OF",
    "TRUSTEES OF",
)

# Honorific prefixes -> display form
NAME_PREFIXES = {
    "MR": "Mr",
    "MRS": "Mrs",
    "MS": "Ms",
    "MISS": "Miss",
    "DR": "Dr",
    "DOCTOR": "Dr",
    "REV": "Rev",
    "REVEREND": "Rev",
    "HON": "Hon",
    "HONORABLE": "Hon",
    "ATTY": "Atty",
    "PROF": "Prof",
    "PROFESSOR": "Prof",
    "CAPT": "Capt",
    "CAPTAIN": "Capt",
    "SGT": "Sgt",
    "LT": "Lt",
    "COL": "Col",
    "MAJ": "Maj",
    "JUDGE": "Judge",
    "PASTOR": "Pastor",
    "FATHER": "Father",
    "SISTER": "Sister",
    "RABBI": "Rabbi",
}

# Generational and professional suffixes -> display form
NAME_SUFFIXES = {
    "JR": "Jr",
    "SR": "Sr",
    "II": "II",
    "III": "III",
    "IV": "IV",
    "VI": "VI",
    "VII": "VII",
    "VIII": "VIII",
    "ESQ": "Esq",
    "ESQUIRE": "Esq",
    "MD": "MD",
    "DDS": "DDS",
    "DMD": "DMD",
    "DO": "DO",
    "DVM": "DVM",
    "JD": "JD",
    "LLM": "LLM",
    "PHD": "PhD",
    "RN": "RN",
    "CPA": "CPA",
    "CFA": "CFA",
    "MBA": "MBA",
    "PE": "PE",
    "RET": "Ret",
}

ROMAN_NUMERAL_RE = re.compile(r"^(?=[IVX]{2,})X{0,3}(IX|IV|V?I{0,3})$")

# Ownership / legal designators stripped anywhere in the text.
# Multi-word forms are regex fragments matched on word boundaries.
NOISE_PATTERNS = (
    r"ET\s*AL",
    r"ET\s*UX(?:OR)?",
    r"ET\s*VIR",
    r"H\s*/\s*W",
    r"H\s*&\s*W",
    r"JT\s*TEN",
    r"JTWROS",
    r"JTROS",
    r"TENANTS?\s+BY\s+THE\s+ENTIRETY",
    r"TENANTS?\s+IN\s+COMMON",
    r"AS\s+JOINT\s+TENANTS",
    r"WITH\s+RIGHTS?\s+OF\s+SURVIVORSHIP",
    r"SUC(?:CESSOR)?\s+TRUSTEES?",
    r"CO\s*-?\s*TRUSTEES?",
    r"AS\s+TRUSTEES?",
    r"TRUSTEES?(?!\s+OF\b)",
    r"TTEES?",
    r"TRS",
    r"U\s*/\s*A",
    r"U\s*/\s*D\s*/\s*T",
    r"FBO",
    r"LIFE\s+ESTATE",
    r"L\s*/\s*E",
    r"DECEASED",
    r"HIS\s+WIFE",
    r"HUSBAND",
    r"WIFE",
    r"A\s+SINGLE\s+(?:MAN|WOMAN|PERSON)",
    r"A\s+MARRIED\s+(?:MAN|WOMAN|COUPLE)",
    r"A\s+WIDOW(?:ER)?",
)

# Single tokens that are never part of a personal name
NOISE_TOKENS = {
    "ETAL", "ETUX", "ETVIR", "JTWROS", "JTROS", "JT", "TIC", "TBE",
    "TRUSTEE", "TRUSTEES", "TTEE", "TTEES", "TRS", "TR", "SUCTR", "COTTEE",
    "FBO", "HUSBAND", "WIFE", "SPOUSE", "SPOUSES", "HEIRS", "DECEASED",
    "REVOCABLE", "IRREVOCABLE", "LIVING", "INT", "INTEREST", "PCT",
}

# Alias markers: text after them names the same owner and is dropped
ALIAS_MARKERS = (r"A\s*/\s*K\s*/\s*A", r"AKA", r"F\s*/\s*K\s*/\s*A", r"FKA", r"N\s*/\s*K\s*/\s*A", r"NKA")

# Leading role markers: the rest of the line is an address, not an owner
CARE_OF_RE = re.compile(r"^\s*(?:C\s*/\s*O|CARE\s+OF|ATTN:?)\b", re.IGNORECASE)

# A care-of marker anywhere cuts the owner text from the marker to the end
CARE_OF_TAIL_RE = re.compile(r"\s*\b(?:C\s*/\s*O|CARE\s+OF|ATTN:?)(?=\s|$).*$", re.IGNORECASE)

# "MR & MRS JOHN SMITH" names one couple under the husband's name
COUPLE_PREFIX_RE = re.compile(r"^\s*MR\.?\s*(?:&|AND)\s*MRS\.?\s+", re.IGNORECASE)

PLACEHOLDER_RE = re.compile(
    r"^[\s*#\-]*(?:N\s*/\s*A|NA|NONE|NULL|UNKNOWN|UNKNOWN\s+(?:OWNER|BUYER|SELLER|GRANTOR|GRANTEE)S?"
    r"|MULTIPLE\s+(?:OWNERS|BUYERS|SELLERS|PARTIES)|SEE\s+ATTACHED|NOT\s+AVAILABLE|"
    r"CONFIDENTIAL|REDACTED)[\s*#\-]*$",
    re.IGNORECASE,
)

# Surname particles kept together with the surname token that follows
SURNAME_PARTICLES = {
    "DE", "DEL", "DELA", "DI", "DA", "DOS", "DU", "VAN", "VON", "DER",
    "DEN", "LA", "LE", "ST", "SAN", "SANTA", "MC", "BIN", "IBN",
}

# Connectors kept lower-case inside recased company names
COMPANY_CONNECTORS = {"OF", "THE", "AND", "FOR", "AT", "IN", "ON", "BY", "TO", "A", "AN"}

# Short words that are not acronyms when recasing company names
COMPANY_SHORT_WORDS = {
    "SUN", "BAY", "OAK", "SEA", "AIR", "ONE", "TWO", "TEN", "NEW", "OLD",
    "BIG", "RED", "TOP", "KEY", "ELM", "ASH", "FOX", "SKY", "WAY", "INN",
    "LOT", "LAW", "ART", "HUB", "BAR", "CAR", "GAS", "OIL", "DAY", "ALL",
    "OUR", "MY", "ST",
}

# Acronyms that contain vowels and stay upper-case in recased company names
COMPANY_ACRONYMS = {
    "ABC", "XYZ", "USA", "AAA", "AIG", "IBM", "AMC", "ATM", "USAA", "CNA",
    "HUD", "IRA", "REO", "UAW", "YMCA", "YWCA",
}

# Display forms for legal suffixes in recased company names
ENTITY_SUFFIX_DISPLAY = {
    "INC": "Inc",
    "INCORPORATED": "Incorporated",
    "CORP": "Corp",
    "CORPORATION": "Corporation",
    "CO": "Co",
    "COMPANY": "Company",
    "LTD": "Ltd",
    "LIMITED": "Limited",
}

# Common given names, used only as a scoring signal for token order
COMMON_FIRST_NAMES = {
    "JAMES", "JOHN", "ROBERT", "MICHAEL", "WILLIAM", "DAVID", "RICHARD",
    "JOSEPH", "THOMAS", "CHARLES", "CHRISTOPHER", "DANIEL", "MATTHEW",
    "ANTHONY", "MARK", "DONALD", "STEVEN", "PAUL", "ANDREW", "JOSHUA",
    "KENNETH", "KEVIN", "BRIAN", "GEORGE", "TIMOTHY", "RONALD", "EDWARD",
    "JASON", "JEFFREY", "RYAN", "JACOB", "GARY", "NICHOLAS", "ERIC",
    "JONATHAN", "STEPHEN", "LARRY", "JUSTIN", "SCOTT", "BRANDON",
    "BENJAMIN", "SAMUEL", "GREGORY", "FRANK", "RAYMOND", "PATRICK",
    "JACK", "DENNIS", "JERRY", "TYLER", "AARON", "JOSE", "HENRY", "ADAM",
    "DOUGLAS", "NATHAN", "PETER", "ZACHARY", "KYLE", "WALTER", "HAROLD",
    "CARL", "ARTHUR", "GERALD", "ROGER", "KEITH", "JUAN", "CARLOS",
    "LUIS", "JESUS", "MIGUEL", "MARY", "PATRICIA", "JENNIFER", "LINDA",
    "ELIZABETH", "BARBARA", "SUSAN", "JESSICA", "SARAH", "KAREN", "LISA",
    "NANCY", "BETTY", "MARGARET", "SANDRA", "ASHLEY", "KIMBERLY", "EMILY",
    "DONNA", "MICHELLE", "DOROTHY", "CAROL", "AMANDA", "MELISSA",
    "DEBORAH", "STEPHANIE", "REBECCA", "SHARON", "LAURA", "CYNTHIA",
    "KATHLEEN", "AMY", "ANGELA", "SHIRLEY", "ANNA", "BRENDA", "PAMELA",
    "EMMA", "NICOLE", "HELEN", "SAMANTHA", "KATHERINE", "CHRISTINE",
    "DEBRA", "RACHEL", "CAROLYN", "JANET", "CATHERINE", "MARIA", "HEATHER",
    "DIANE", "JULIE", "JOYCE", "VICTORIA", "RUTH", "VIRGINIA", "LAUREN",
    "KELLY", "CHRISTINA", "JOAN", "EVELYN", "JUDITH", "ANDREA", "HANNAH",
    "MEGAN", "CHERYL", "JACQUELINE", "MARTHA", "GLORIA", "TERESA", "ANN",
    "SARA", "MADISON", "FRANCES", "KATHRYN", "JANICE", "JEAN", "ABIGAIL",
    "ALICE", "JUDY", "SOPHIA", "GRACE", "DENISE", "AMBER", "DORIS",
    "MARILYN", "DANIELLE", "BEVERLY", "ISABELLA", "THERESA", "DIANA",
    "NATALIE", "BRITTANY", "CHARLOTTE", "MARIE", "KAYLA", "ALEXIS", "LORI",
    "JANE", "ROSA", "CARMEN", "ANA",
}


def fold_accents(text: str) -> str:
    """Strip diacritics: JOSÉ -> JOSE."""
    decomposed = unicodedata.normalize("NFKD", text or "")
    return "".join(ch for ch in decomposed if not unicodedata.combining(ch))


def normalize_token(token: str) -> str:
    """Upper-case a token, fold accents and drop periods and surrounding punctuation."""
    cleaned = fold_accents(token).upper().replace(".", "")
    return cleaned.strip(" ,;:'\"-()[]{}*")


def is_prefix(token: str) -> bool:
    return normalize_token(token) in NAME_PREFIXES


def is_suffix(token: str) -> bool:
    norm = normalize_token(token)
    return norm in NAME_SUFFIXES or bool(ROMAN_NUMERAL_RE.match(norm))


def is_affix(token: str) -> bool:
    return is_prefix(token) or is_suffix(token)


def prefix_display(token: str) -> str:
    return NAME_PREFIXES[normalize_token(token)]


def suffix_display(token: str) -> str:
    norm = normalize_token(token)
    return NAME_SUFFIXES.get(norm, norm)


def is_noise_token(token: str) -> bool:
    return normalize_token(token) in NOISE_TOKENS


def is_common_first_name(token: str) -> bool:
    return normalize_token(token) in COMMON_FIRST_NAMES


def is_surname_particle(token: str) -> bool:
    return normalize_token(token) in SURNAME_PARTICLES
