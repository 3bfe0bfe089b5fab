from dataclasses import dataclass, field

from bead_pattern.options import RenderOptions
from bead_pattern.palette import HEX_COLOR_SYSTEM
from bead_pattern.types import ColorSystem

from .sources.csv_source import CsvConfig
from .sources.sample_source import SampleConfig

AppConfig = CsvConfig | SampleConfig


@dataclass(frozen=True)
class ExportConfig:
    options: RenderOptions = field(default_factory=RenderOptions)
    color_system: ColorSystem = HEX_COLOR_SYSTEM
