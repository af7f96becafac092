from types import MappingProxyType
from typing import Mapping, NamedTuple

_SPECS = "https://developer.amazon.com/docs/fire-tv/"


class FireTvModel(NamedTuple):
    name: str
    link: str


CPU_ABI_NAMES: Mapping[str, str] = MappingProxyType({
    "armeabi": "ARM EABI (32-bit)",
    "armeabi-v7a": "ARM EABI v7a (32-bit, with hardware floating-point support)",
    "arm64-v8a": "ARM 64-bit (v8a)",
    "x86": "Intel x86 (32-bit)",
    "x86_64": "Intel x86_64 (64-bit)",
    "mips": "MIPS (32-bit)",
    "mips64": "MIPS 64-bit",
})


def _model(name: str, page: str, anchor: str) -> FireTvModel:
    return FireTvModel(name, f"{_SPECS}device-specifications-{page}.html?v={anchor}")


# AFTMM is also reported by the Nebula and TCL soundbars; the Fire TV Stick 4K wins.
FIRE_TV_MODELS: Mapping[str, FireTvModel] = MappingProxyType({
    "AFTTOR001": _model("Panasonic OLED TV VIERA with Fire TV integration (2024)", "fire-tv-edition-smart-tv", "panasonic_fire_tv_2024_jp"),
    "AFTWYM01": _model("Panasonic OLED TV VIERA with Fire TV integration (2024)", "fire-tv-edition-smart-tv", "panasonic_fire_tv_2024_jp"),
    "AFTGOLDFF": _model("Panasonic Fire TV (2024)", "fire-tv-edition-smart-tv-emea", "ftvedition_panasonic4k"),
    "AFTDEC012E": _model("Fire TV - TCL S4/S5/Q5/Q6 Series 4K UHD HDR LED (2024)", "fire-tv-edition-smart-tv", "tcl_s4s5q5q6_2024"),
    "AFTBTX4": _model("Redmi 108cm (43 inches) 4K Ultra HD smart LED Fire TV (2023)", "fire-tv-edition-smart-tv", "redmi_108_f_4k_uhd_2023"),
    "AFTMD002": _model("TCL Class S3 1080p LED Smart TV with Fire TV (2023)", "fire-tv-edition-smart-tv", "tclclass_s3_1080_2023"),
    "AFTKRT": _model("Fire TV Stick 4K Max - 2nd Gen (2023) - 16 GB", "fire-tv-stick", "ftvstick4kmax_gen2_16"),
    "AFTKM": _model("Fire TV Stick 4K - 2nd Gen (2023) - 8 GB", "fire-tv-stick", "ftvstick4k_gen2_8"),
    "AFTSHN02": _model('TCL 32" FHD, 40" FHD Fire TV (2023)', "fire-tv-edition-smart-tv", "tclsmart_fhd__led_2023"),
    "AFTMD001": _model("Fire TV - TCL S4 Series 4K UHD HDR LED (2023)", "fire-tv-edition-smart-tv", "tclsseries_4K_2023"),
    "AFTKA002": _model("Fire TV 2-Series (2023)", "fire-tv-edition-smart-tv", "2series2023"),
    "AFTKAUK002": _model("Fire TV 2-Series (2023)", "fire-tv-edition-smart-tv", "2series2023"),
    "AFTHA004": _model("Toshiba 4K UHD - Fire TV (2022)", "fire-tv-edition-smart-tv", "toshiba4k2022"),
    "AFTLBT962E2": _model("BMW (2022)", "automotive", "BMW2022"),
    "AEOHY": _model("Echo Show 15 (2021)", "echo-show", "echoshow2021"),
    "AFTTIFF43": _model("Fire TV Omni QLED Series (2022)", "fire-tv-edition-smart-tv", "omniseries2"),
    "AFTGAZL": _model("Fire TV Cube - 3rd Gen (2022)", "fire-tv-cube", "ftvcubegen3"),
    "AFTANNA0": _model("Xiaomi F2 4K - Fire TV (2022)", "fire-tv-edition-smart-tv", "firetvedition_xiaomi2022"),
    "AFTHA001": _model("Hisense U6 4K UHD - Fire TV (2022)", "fire-tv-edition-smart-tv", "firetvedition_hisense4k"),
    "AFTMON001": _model("Funai 4K - Fire TV (2022)", "fire-tv-edition-smart-tv", "firetvedition_funai4k2022"),
    "AFTMON002": _model("Funai 4K - Fire TV (2022)", "fire-tv-edition-smart-tv", "firetvedition_funai4k2022"),
    "AFTJULI1": _model("JVC 4K - Fire TV with Freeview Play (2021)", "fire-tv-edition-smart-tv", "firetvedition_jvc4kfp"),
    "AFTHA002": _model("Toshiba V35 Series LED FHD/HD - Fire TV (2021)", "fire-tv-edition-smart-tv", "firetvedition_toshibav35"),
    "AFTWMST22": _model("JVC 2K - Fire TV (2020)", "fire-tv-edition-smart-tv", "firetveditionuk_jvc2"),
    "AFTTIFF55": _model("Onida HD/FHD - Fire TV (2020)", "fire-tv-edition-smart-tv", "ftveditionin_onidahd2020"),
    "AFTWI001": _model("ok 4K - Fire TV (2020)", "fire-tv-edition-smart-tv", "ftveditionde_ok4k"),
    "AFTSSS": _model("Fire TV Stick - 3rd Gen (2020)", "fire-tv-stick", "ftvstickgen3"),
    "AFTSS": _model("Fire TV Stick Lite - 1st Gen (2020)", "fire-tv-stick", "ftvsticklite"),
    "AFTDCT31": _model("Toshiba 4K UHD - Fire TV (2020)", "fire-tv-edition-smart-tv", "ftveditiontoshiba4k_2020"),
    "AFTPR001": _model("AmazonBasics 4K - Fire TV (2020)", "fire-tv-edition-smart-tv", "ftveditionin_amazonbasics4k"),
    "AFTBU001": _model("AmazonBasics HD/FHD - Fire TV (2020)", "fire-tv-edition-smart-tv", "ftveditionin_amazonbasics2k"),
    "AFTLE": _model("Onida HD - Fire TV (2019)", "fire-tv-edition-smart-tv", "ftveditionin_onidahd"),
    "AFTR": _model("Fire TV Cube - 2nd Gen (2019)", "fire-tv-cube", "ftvcubegen2"),
    "AFTEUFF014": _model("Grundig OLED 4K - Fire TV (2019)", "fire-tv-edition-smart-tv", "ftveditionde_grundigoled"),
    "AFTEU014": _model("Grundig Vision 7, 4K - Fire TV (2019)", "fire-tv-edition-smart-tv", "ftveditionde_grundigvision7"),
    "AFTSO001": _model("JVC 4K - Fire TV (2019)", "fire-tv-edition-smart-tv", "ftveditionuk_jvc4k"),
    "AFTEU011": _model("Grundig Vision 6 HD - Fire TV (2019)", "fire-tv-edition-smart-tv", "ftveditionde_grundigvision6"),
    "AFTJMST12": _model("Insignia 4K - Fire TV (2018)", "fire-tv-edition-smart-tv", "ftveditioninsignia4k"),
    "AFTA": _model("Fire TV Cube - 1st Gen (2018)", "fire-tv-cube", "ftvcubegen1"),
    "AFTMM": _model("Fire TV Stick 4K - 1st Gen (2018)", "fire-tv-stick", "ftvstick4k"),
    "AFTT": _model("Fire TV Stick - Basic Edition (2017)", "fire-tv-stick", "ftvstickbasicedition"),
    "AFTRS": _model("Element 4K - Fire TV (2017)", "fire-tv-edition-smart-tv", "ftveditionelement"),
    "AFTN": _model("Fire TV - 3rd Gen (2017)", "fire-tv-pendant-box", "ftvgen3"),
    "AFTS": _model("Fire TV - 2nd Gen (2015)", "fire-tv-pendant-box", "ftvgen2"),
    "AFTM": _model("Fire TV Stick - 1st Gen (2014)", "fire-tv-stick", "ftvstickgen1"),
    "AFTB": _model("Fire TV - 1st Gen (2014)", "fire-tv-pendant-box", "ftvgen1"),
})

ICONS: Mapping[str, str] = MappingProxyType({
    "Model": "\U0001F4F1",
    "Manufacturer": "\U0001F3ED",
    "Android Version": "\U0001F916",
    "API Level": "\U0001F522",
    "Build Number": "\U0001F3D7️",
    "Fire OS Version": "\U0001F525",
    "Fire OS Build Number": "\U0001F525",
    "IP Address": "\U0001F310",
    "WiFi SSID": "\U0001F4F6",
    "CPU": "\U0001F4BB",
    "CPU ABI": "\U0001F9EE",
    "Memory": "\U0001F4BE",
    "Storage": "\U0001F4BD",
    "Screen Resolution": "\U0001F4FA",
    "Screen Density": "\U0001F50D",
    "Battery Level": "\U0001F50B",
})

NO_ICON = "  "


def map_cpu_abi(abi: str) -> str:
    return CPU_ABI_NAMES.get(abi, abi)


def map_fire_os_model(model: str) -> str:
    known = FIRE_TV_MODELS.get(model)
    if known is None:
        return model
    return f"{known.name} ({known.link})"


def icon_for(label: str, show_icons: bool) -> str:
    if not show_icons:
        return NO_ICON
    return ICONS.get(label, NO_ICON)
