# nn/__init__.py
from .config import Activation, MLPConfig
from .module import Module
from .layers import Neuron, Layer, MLP

__all__ = ["Activation", "MLPConfig", "Module", "Neuron", "Layer", "MLP"]
