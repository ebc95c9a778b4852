"""Named Currency constants, one per code in `suite_money.domain.iso4217.CURRENCY_NAMES`.

Example:
    from suite_money.domain.currency_registry import GBP, USD
"""

from suite_money.domain.currency import Currency

AED = Currency("AED")
AFN = Currency("AFN")
ALL = Currency("ALL")
AMD = Currency("AMD")
ANG = Currency("ANG")
AOA = Currency("AOA")
ARS = Currency("ARS")
AUD = Currency("AUD")
AWG = Currency("AWG")
AZN = Currency("AZN")
BAM = Currency("BAM")
BBD = Currency("BBD")
BDT = Currency("BDT")
BGN = Currency("BGN")
BHD = Currency("BHD")
BIF = Currency("BIF")
BMD = Currency("BMD")
BND = Currency("BND")
BOB = Currency("BOB")
BRL = Currency("BRL")
BSD = Currency("BSD")
BTC = Currency("BTC")
BTN = Currency("BTN")
BWP = Currency("BWP")
BYR = Currency("BYR")
BZD = Currency("BZD")
CAD = Currency("CAD")
CDF = Currency("CDF")
CHF = Currency("CHF")
CLF = Currency("CLF")
CLP = Currency("CLP")
CNY = Currency("CNY")
COP = Currency("COP")
CRC = Currency("CRC")
CUP = Currency("CUP")
CVE = Currency("CVE")
CZK = Currency("CZK")
DJF = Currency("DJF")
DKK = Currency("DKK")
DOP = Currency("DOP")
DZD = Currency("DZD")
EEK = Currency("EEK")
EGP = Currency("EGP")
ETB = Currency("ETB")
EUR = Currency("EUR")
FJD = Currency("FJD")
FKP = Currency("FKP")
GBP = Currency("GBP")
GEL = Currency("GEL")
GHS = Currency("GHS")
GIP = Currency("GIP")
GMD = Currency("GMD")
GNF = Currency("GNF")
GTQ = Currency("GTQ")
GYD = Currency("GYD")
HKD = Currency("HKD")
HNL = Currency("HNL")
HRK = Currency("HRK")
HTG = Currency("HTG")
HUF = Currency("HUF")
IDR = Currency("IDR")
ILS = Currency("ILS")
INR = Currency("INR")
IQD = Currency("IQD")
IRR = Currency("IRR")
ISK = Currency("ISK")
JEP = Currency("JEP")
JMD = Currency("JMD")
JOD = Currency("JOD")
JPY = Currency("JPY")
KES = Currency("KES")
KGS = Currency("KGS")
KHR = Currency("KHR")
KMF = Currency("KMF")
KPW = Currency("KPW")
KRW = Currency("KRW")
KWD = Currency("KWD")
KYD = Currency("KYD")
KZT = Currency("KZT")
LAK = Currency("LAK")
LBP = Currency("LBP")
LKR = Currency("LKR")
LRD = Currency("LRD")
LSL = Currency("LSL")
LTL = Currency("LTL")
LVL = Currency("LVL")
LYD = Currency("LYD")
MAD = Currency("MAD")
MDL = Currency("MDL")
MGA = Currency("MGA")
MKD = Currency("MKD")
MMK = Currency("MMK")
MNT = Currency("MNT")
MOP = Currency("MOP")
MRO = Currency("MRO")
MUR = Currency("MUR")
MVR = Currency("MVR")
MWK = Currency("MWK")
MXN = Currency("MXN")
MYR = Currency("MYR")
MZN = Currency("MZN")
NAD = Currency("NAD")
NGN = Currency("NGN")
NIO = Currency("NIO")
NOK = Currency("NOK")
NPR = Currency("NPR")
NZD = Currency("NZD")
OMR = Currency("OMR")
PAB = Currency("PAB")
PEN = Currency("PEN")
PGK = Currency("PGK")
PHP = Currency("PHP")
PKR = Currency("PKR")
PLN = Currency("PLN")
PYG = Currency("PYG")
QAR = Currency("QAR")
RON = Currency("RON")
RSD = Currency("RSD")
RUB = Currency("RUB")
RWF = Currency("RWF")
SAR = Currency("SAR")
SBD = Currency("SBD")
SCR = Currency("SCR")
SDG = Currency("SDG")
SEK = Currency("SEK")
SGD = Currency("SGD")
SHP = Currency("SHP")
SLL = Currency("SLL")
SOS = Currency("SOS")
SRD = Currency("SRD")
STD = Currency("STD")
SVC = Currency("SVC")
SYP = Currency("SYP")
SZL = Currency("SZL")
THB = Currency("THB")
TJS = Currency("TJS")
TMT = Currency("TMT")
TND = Currency("TND")
TOP = Currency("TOP")
TRY = Currency("TRY")
TTD = Currency("TTD")
TWD = Currency("TWD")
TZS = Currency("TZS")
UAH = Currency("UAH")
UGX = Currency("UGX")
USD = Currency("USD")
UYU = Currency("UYU")
UZS = Currency("UZS")
VEF = Currency("VEF")
VND = Currency("VND")
VUV = Currency("VUV")
WST = Currency("WST")
XAF = Currency("XAF")
XAG = Currency("XAG")
XAU = Currency("XAU")
XCD = Currency("XCD")
XDR = Currency("XDR")
XOF = Currency("XOF")
XPD = Currency("XPD")
XPF = Currency("XPF")
XTS = Currency("XTS")
XXX = Currency("XXX")
YER = Currency("YER")
ZAR = Currency("ZAR")
ZMK = Currency("ZMK")
ZWL = Currency("ZWL")
