# nn/module.py
from typing import List

from ..aad.core.engine import zero_grad
from ..aad.core.node import Node


class Module:
    """Anything that owns learnable leaf Nodes."""

    def parameters(self) -> List[Node]:
        return []

    def zero_grad(self) -> None:
        zero_grad(self.parameters())

    def num_parameters(self) -> int:
        return len(self.parameters())
