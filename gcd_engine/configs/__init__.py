from .logging import logging_config
from .engine import engine_config
from ..utils.logger import Logger
from typing import Dict, List


class ConfigManager:
    """
    Global configuration manager for the engine
    """
    engine = engine_config
    logging = logging_config

    def configure(self, **overrides):
        """
        Override multiple configs at once.

        Example:
            config.configure(engine={"STRICT_ZERO_CHECK": False}, logging={"PROFILE": True})
        """
        warned = False
        for section, values in overrides.items():
            cfg = getattr(self, section, None)
            if cfg is not None:
                for key, val in values.items():
                    if key not in cfg.get_configurations():
                        Logger(
                            f'{key} is not a configuration of section {section}', Logger.Levels.inform
                        ).log()
                        continue
                    setattr(cfg, key, val)
            else:
                Logger(
                    f'section {section} is not defined, try: engine / logging',
                    Logger.Levels.inform
                ).log()
                if not warned:
                    warned = True
                    Logger(f'Note that these are the builtin attributes: '
                           f'{self.engine}\n\n{self.logging}', Logger.Levels.inform
                           ).log()

    def get_configurables(self) -> Dict[str, List[str]]:
        return {
            'engine': self.engine.get_configurations(),
            'logging': self.logging.get_configurations()
        }


config = ConfigManager()

__all__ = [
    'config',
    'engine_config',
    'logging_config'
]
