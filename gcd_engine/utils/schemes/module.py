from abc import ABC, abstractmethod
from typing import Optional


class Module(ABC):
    """
    The basic building block of the engine is this module
    """

    def __init__(self,
                 name: Optional[str] = None,
                 description: Optional[str] = None,
                 version: Optional[str] = None):
        """
        :param name: Module name
        :param description: Description of the module
        :param version: The version of the module
        """
        self.name = name if name else self.__class__.__name__
        self.description = description
        self.version = version

    @abstractmethod
    def execute(self, *args, **kwargs):
        """
        Executes the module. The child classes specify the return value and arguments
        """
        raise NotImplementedError

    def __repr__(self) -> str:
        return f'{self.name} [version: {self.version}]'
