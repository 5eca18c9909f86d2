from __future__ import annotations

from types import MappingProxyType
from typing import Mapping

from bidict import frozenbidict

from suite_prices.domain.monetary.currency import Currency, CurrencyType
from suite_prices.domain.monetary.errors import UnknownCurrencyError

F = CurrencyType.FIAT
C = CurrencyType.COMMODITY
N = CurrencyType.FUND

# ISO 4217 active codes: (code, numeric code, fraction digits, name, type)
_ISO_4217 = (
    ("AED", "784", 2, "UAE Dirham", F),
    ("AFN", "971", 2, "Afghani", F),
    ("ALL", "008", 2, "Lek", F),
    ("AMD", "051", 2, "Armenian Dram", F),
    ("ANG", "532", 2, "Netherlands Antillean Guilder", F),
    ("AOA", "973", 2, "Kwanza", F),
    ("ARS", "032", 2, "Argentine Peso", F),
    ("AUD", "036", 2, "Australian Dollar", F),
    ("AWG", "533", 2, "Aruban Florin", F),
    ("AZN", "944", 2, "Azerbaijan Manat", F),
    ("BAM", "977", 2, "Convertible Mark", F),
    ("BBD", "052", 2, "Barbados Dollar", F),
    ("BDT", "050", 2, "Taka", F),
    ("BGN", "975", 2, "Bulgarian Lev", F),
    ("BHD", "048", 3, "Bahraini Dinar", F),
    ("BIF", "108", 0, "Burundi Franc", F),
    ("BMD", "060", 2, "Bermudian Dollar", F),
    ("BND", "096", 2, "Brunei Dollar", F),
    ("BOB", "068", 2, "Boliviano", F),
    ("BOV", "984", 2, "Mvdol", N),
    ("BRL", "986", 2, "Brazilian Real", F),
    ("BSD", "044", 2, "Bahamian Dollar", F),
    ("BTN", "064", 2, "Ngultrum", F),
    ("BWP", "072", 2, "Pula", F),
    ("BYN", "933", 2, "Belarusian Ruble", F),
    ("BZD", "084", 2, "Belize Dollar", F),
    ("CAD", "124", 2, "Canadian Dollar", F),
    ("CDF", "976", 2, "Congolese Franc", F),
    ("CHE", "947", 2, "WIR Euro", N),
    ("CHF", "756", 2, "Swiss Franc", F),
    ("CHW", "948", 2, "WIR Franc", N),
    ("CLF", "990", 4, "Unidad de Fomento", N),
    ("CLP", "152", 0, "Chilean Peso", F),
    ("CNY", "156", 2, "Yuan Renminbi", F),
    ("COP", "170", 2, "Colombian Peso", F),
    ("COU", "970", 2, "Unidad de Valor Real", N),
    ("CRC", "188", 2, "Costa Rican Colon", F),
    ("CUP", "192", 2, "Cuban Peso", F),
    ("CVE", "132", 2, "Cabo Verde Escudo", F),
    ("CZK", "203", 2, "Czech Koruna", F),
    ("DJF", "262", 0, "Djibouti Franc", F),
    ("DKK", "208", 2, "Danish Krone", F),
    ("DOP", "214", 2, "Dominican Peso", F),
    ("DZD", "012", 2, "Algerian Dinar", F),
    ("EGP", "818", 2, "Egyptian Pound", F),
    ("ERN", "232", 2, "Nakfa", F),
    ("ETB", "230", 2, "Ethiopian Birr", F),
    ("EUR", "978", 2, "Euro", F),
    ("FJD", "242", 2, "Fiji Dollar", F),
    ("FKP", "238", 2, "Falkland Islands Pound", F),
    ("GBP", "826", 2, "Pound Sterling", F),
    ("GEL", "981", 2, "Lari", F),
    ("GHS", "936", 2, "Ghana Cedi", F),
    ("GIP", "292", 2, "Gibraltar Pound", F),
    ("GMD", "270", 2, "Dalasi", F),
    ("GNF", "324", 0, "Guinean Franc", F),
    ("GTQ", "320", 2, "Quetzal", F),
    ("GYD", "328", 2, "Guyana Dollar", F),
    ("HKD", "344", 2, "Hong Kong Dollar", F),
    ("HNL", "340", 2, "Lempira", F),
    ("HTG", "332", 2, "Gourde", F),
    ("HUF", "348", 2, "Forint", F),
    ("IDR", "360", 2, "Rupiah", F),
    ("ILS", "376", 2, "New Israeli Sheqel", F),
    ("INR", "356", 2, "Indian Rupee", F),
    ("IQD", "368", 3, "Iraqi Dinar", F),
    ("IRR", "364", 2, "Iranian Rial", F),
    ("ISK", "352", 0, "Iceland Krona", F),
    ("JMD", "388", 2, "Jamaican Dollar", F),
    ("JOD", "400", 3, "Jordanian Dinar", F),
    ("JPY", "392", 0, "Yen", F),
    ("KES", "404", 2, "Kenyan Shilling", F),
    ("KGS", "417", 2, "Som", F),
    ("KHR", "116", 2, "Riel", F),
    ("KMF", "174", 0, "Comorian Franc", F),
    ("KPW", "408", 2, "North Korean Won", F),
    ("KRW", "410", 0, "Won", F),
    ("KWD", "414", 3, "Kuwaiti Dinar", F),
    ("KYD", "136", 2, "Cayman Islands Dollar", F),
    ("KZT", "398", 2, "Tenge", F),
    ("LAK", "418", 2, "Lao Kip", F),
    ("LBP", "422", 2, "Lebanese Pound", F),
    ("LKR", "144", 2, "Sri Lanka Rupee", F),
    ("LRD", "430", 2, "Liberian Dollar", F),
    ("LSL", "426", 2, "Loti", F),
    ("LYD", "434", 3, "Libyan Dinar", F),
    ("MAD", "504", 2, "Moroccan Dirham", F),
    ("MDL", "498", 2, "Moldovan Leu", F),
    ("MGA", "969", 2, "Malagasy Ariary", F),
    ("MKD", "807", 2, "Denar", F),
    ("MMK", "104", 2, "Kyat", F),
    ("MNT", "496", 2, "Tugrik", F),
    ("MOP", "446", 2, "Pataca", F),
    ("MRU", "929", 2, "Ouguiya", F),
    ("MUR", "480", 2, "Mauritius Rupee", F),
    ("MVR", "462", 2, "Rufiyaa", F),
    ("MWK", "454", 2, "Malawi Kwacha", F),
    ("MXN", "484", 2, "Mexican Peso", F),
    ("MXV", "979", 2, "Mexican Unidad de Inversion (UDI)", N),
    ("MYR", "458", 2, "Malaysian Ringgit", F),
    ("MZN", "943", 2, "Mozambique Metical", F),
    ("NAD", "516", 2, "Namibia Dollar", F),
    ("NGN", "566", 2, "Naira", F),
    ("NIO", "558", 2, "Cordoba Oro", F),
    ("NOK", "578", 2, "Norwegian Krone", F),
    ("NPR", "524", 2, "Nepalese Rupee", F),
    ("NZD", "554", 2, "New Zealand Dollar", F),
    ("OMR", "512", 3, "Rial Omani", F),
    ("PAB", "590", 2, "Balboa", F),
    ("PEN", "604", 2, "Sol", F),
    ("PGK", "598", 2, "Kina", F),
    ("PHP", "608", 2, "Philippine Peso", F),
    ("PKR", "586", 2, "Pakistan Rupee", F),
    ("PLN", "985", 2, "Zloty", F),
    ("PYG", "600", 0, "Guarani", F),
    ("QAR", "634", 2, "Qatari Rial", F),
    ("RON", "946", 2, "Romanian Leu", F),
    ("RSD", "941", 2, "Serbian Dinar", F),
    ("RUB", "643", 2, "Russian Ruble", F),
    ("RWF", "646", 0, "Rwanda Franc", F),
    ("SAR", "682", 2, "Saudi Riyal", F),
    ("SBD", "090", 2, "Solomon Islands Dollar", F),
    ("SCR", "690", 2, "Seychelles Rupee", F),
    ("SDG", "938", 2, "Sudanese Pound", F),
    ("SEK", "752", 2, "Swedish Krona", F),
    ("SGD", "702", 2, "Singapore Dollar", F),
    ("SHP", "654", 2, "Saint Helena Pound", F),
    ("SLE", "925", 2, "Leone", F),
    ("SOS", "706", 2, "Somali Shilling", F),
    ("SRD", "968", 2, "Surinam Dollar", F),
    ("SSP", "728", 2, "South Sudanese Pound", F),
    ("STN", "930", 2, "Dobra", F),
    ("SVC", "222", 2, "El Salvador Colon", F),
    ("SYP", "760", 2, "Syrian Pound", F),
    ("SZL", "748", 2, "Lilangeni", F),
    ("THB", "764", 2, "Baht", F),
    ("TJS", "972", 2, "Somoni", F),
    ("TMT", "934", 2, "Turkmenistan New Manat", F),
    ("TND", "788", 3, "Tunisian Dinar", F),
    ("TOP", "776", 2, "Pa'anga", F),
    ("TRY", "949", 2, "Turkish Lira", F),
    ("TTD", "780", 2, "Trinidad and Tobago Dollar", F),
    ("TWD", "901", 2, "New Taiwan Dollar", F),
    ("TZS", "834", 2, "Tanzanian Shilling", F),
    ("UAH", "980", 2, "Hryvnia", F),
    ("UGX", "800", 0, "Uganda Shilling", F),
    ("USD", "840", 2, "US Dollar", F),
    ("USN", "997", 2, "US Dollar (Next day)", N),
    ("UYI", "940", 0, "Uruguay Peso en Unidades Indexadas (UI)", N),
    ("UYU", "858", 2, "Peso Uruguayo", F),
    ("UYW", "927", 4, "Unidad Previsional", N),
    ("UZS", "860", 2, "Uzbekistan Sum", F),
    ("VED", "926", 2, "Bolivar Soberano", F),
    ("VES", "928", 2, "Bolivar Soberano", F),
    ("VND", "704", 0, "Dong", F),
    ("VUV", "548", 0, "Vatu", F),
    ("WST", "882", 2, "Tala", F),
    ("XAF", "950", 0, "CFA Franc BEAC", F),
    ("XAG", "961", 4, "Silver", C),
    ("XAU", "959", 4, "Gold", C),
    ("XCD", "951", 2, "East Caribbean Dollar", F),
    ("XDR", "960", 2, "SDR (Special Drawing Right)", N),
    ("XOF", "952", 0, "CFA Franc BCEAO", F),
    ("XPD", "964", 4, "Palladium", C),
    ("XPF", "953", 0, "CFP Franc", F),
    ("XPT", "962", 4, "Platinum", C),
    ("YER", "886", 2, "Yemeni Rial", F),
    ("ZAR", "710", 2, "Rand", F),
    ("ZMW", "967", 2, "Zambian Kwacha", F),
    ("ZWG", "924", 2, "Zimbabwe Gold", F),
)

# Built once at import; read-only afterwards
_CURRENCIES: Mapping[str, Currency] = MappingProxyType({row[0]: Currency(*row) for row in _ISO_4217})

# Alphabetic code <-> numeric code
_NUMERIC_CODES: frozenbidict = frozenbidict((currency.code, currency.numeric_code) for currency in _CURRENCIES.values())


def validate_currency(code: str) -> str:
    """Normalize and validate an ISO 4217 alphabetic code.

    Lookup is case-insensitive and ignores surrounding whitespace, so
    `validate_currency("usd") == validate_currency("USD") == "USD"`.

    Args:
        code (str): Currency code to validate.

    Returns:
        str: Upper-case code.

    Raises:
        UnknownCurrencyError: If $code is not a string or not a known ISO code.
    """
    if not isinstance(code, str):
        raise UnknownCurrencyError(code)

    normalized = code.strip().upper()
    if normalized not in _CURRENCIES:
        raise UnknownCurrencyError(code)

    return normalized


def get_currency(code: str | Currency) -> Currency:
    """Get the registered `Currency` for $code.

    A `Currency` instance is accepted as well and resolved to the registered
    instance with the same code.

    Raises:
        UnknownCurrencyError: If $code is not a known ISO code.
    """
    if isinstance(code, Currency):
        code = code.code
    return _CURRENCIES[validate_currency(code)]


def fraction_digits(code: str | Currency) -> int:
    """Get the canonical number of fraction digits (minor units) of a currency.

    Raises:
        UnknownCurrencyError: If $code is not a known ISO code.
    """
    return get_currency(code).precision


def currency_from_numeric(numeric_code: str | int) -> Currency:
    """Get currency by its ISO numeric code (e.g. "840" or 840 for USD).

    Raises:
        UnknownCurrencyError: If no registered currency has this numeric code.
    """
    key = f"{numeric_code:03d}" if isinstance(numeric_code, int) and not isinstance(numeric_code, bool) else str(numeric_code).strip()
    if key not in _NUMERIC_CODES.inverse:
        raise UnknownCurrencyError(numeric_code)
    return _CURRENCIES[_NUMERIC_CODES.inverse[key]]


def available_codes() -> tuple[str, ...]:
    """Get all registered alphabetic codes in sorted order."""
    return tuple(sorted(_CURRENCIES))


# Frequently used currencies
USD = _CURRENCIES["USD"]
EUR = _CURRENCIES["EUR"]
GBP = _CURRENCIES["GBP"]
CHF = _CURRENCIES["CHF"]
JPY = _CURRENCIES["JPY"]
VND = _CURRENCIES["VND"]
DKK = _CURRENCIES["DKK"]
KWD = _CURRENCIES["KWD"]
XAU = _CURRENCIES["XAU"]
