import yaml
from pathlib import Path

CONFIG_PATH = Path(__file__).resolve().parents[2] / "config" / "gedcom_chart.yml"


class ChartConfig:
    def __init__(self, data):
        self.paths = data.get("paths", {}) or {}
        self.logging = data.get("logging", {}) or {}
        self.chart = data.get("chart", {}) or {}
        self.debug = data.get("debug", False)

    @property
    def family_separator(self) -> bool:
        return bool(self.chart.get("family_separator", True))

    @property
    def initials(self) -> bool:
        return bool(self.chart.get("initials", True))

    @property
    def honorifics(self):
        return self.chart.get("honorifics")


def load_config(path: Path = CONFIG_PATH) -> 'ChartConfig':
    # An installed copy has no project config/ directory; run on defaults.
    if not path.exists():
        return ChartConfig({})

    with open(path, "r", encoding="utf-8") as f:
        data = yaml.safe_load(f) or {}

    return ChartConfig(data)

_config_cache = None

def get_config() -> 'ChartConfig':
    global _config_cache
    if _config_cache is None:
        _config_cache = load_config()
    return _config_cache
