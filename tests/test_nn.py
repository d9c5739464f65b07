import numpy as np
import pytest

from scalar_autodiff import (
    Activation,
    DimensionMismatch,
    Layer,
    MLP,
    MLPConfig,
    Neuron,
    Node,
    propagate,
)


def test_end_to_end_linear_network():
    neuron = Neuron(2, Activation.LINEAR, weights=[1.0, -1.0], bias=0.0)
    model = MLP.from_layers([Layer.from_neurons([neuron])])

    out = model([Node(2.0), Node(3.0)])
    assert len(out) == 1
    assert out[0].value == -1.0

    propagate(out[0])
    assert [w.grad for w in neuron.weights] == [2.0, 3.0]
    assert neuron.bias.grad == 1.0


def test_neuron_dimension_mismatch():
    neuron = Neuron(3, rng=np.random.default_rng(0))
    with pytest.raises(DimensionMismatch) as excinfo:
        neuron([Node(1.0), Node(2.0)])
    assert excinfo.value.expected == 3
    assert excinfo.value.actual == 2


def test_neuron_never_pads_or_truncates():
    neuron = Neuron(2, rng=np.random.default_rng(0))
    with pytest.raises(DimensionMismatch):
        neuron([1.0, 2.0, 3.0])


def test_neuron_supplied_weights_must_match_width():
    with pytest.raises(DimensionMismatch):
        Neuron(3, weights=[1.0, 2.0])


def test_neuron_needs_inputs():
    with pytest.raises(ValueError):
        Neuron(0)


def test_neuron_activations():
    x = [Node(1.0)]
    assert Neuron(1, "tanh", weights=[2.0]).forward(x).value == pytest.approx(np.tanh(2.0))
    assert Neuron(1, "relu", weights=[-2.0]).forward(x).value == 0.0
    assert Neuron(1, "linear", weights=[-2.0], bias=0.5).forward(x).value == -1.5


def test_neuron_accepts_plain_numbers():
    neuron = Neuron(2, Activation.LINEAR, weights=[1.0, 1.0], bias=1.0)
    assert neuron([2.0, np.float64(3.0)]).value == 6.0


def test_neuron_initialisation_is_bounded_and_seeded():
    n1 = Neuron(50, rng=np.random.default_rng(42))
    n2 = Neuron(50, rng=np.random.default_rng(42))
    values = [w.value for w in n1.weights]
    assert values == [w.value for w in n2.weights]
    assert all(-1.0 <= v <= 1.0 for v in values)
    assert n1.bias.value == 0.0


def test_neuron_forward_does_not_touch_parameters():
    neuron = Neuron(2, weights=[0.5, -0.5], bias=0.1)
    neuron([1.0, 2.0])
    assert [w.value for w in neuron.weights] == [0.5, -0.5]
    assert all(p.grad == 0.0 for p in neuron.parameters())


def test_layer_outputs_one_node_per_neuron():
    layer = Layer(3, 4, rng=np.random.default_rng(1))
    out = layer([1.0, 2.0, 3.0])
    assert len(out) == 4
    assert all(isinstance(o, Node) for o in out)
    assert layer.n_inputs == 3 and layer.n_outputs == 4


def test_layer_dimension_mismatch():
    layer = Layer(3, 2, rng=np.random.default_rng(0))
    with pytest.raises(DimensionMismatch):
        layer([1.0, 2.0])
    with pytest.raises(DimensionMismatch):
        layer([1.0, 2.0, 3.0, 4.0])


def test_layer_neurons_share_inputs():
    layer = Layer.from_neurons([
        Neuron(2, "linear", weights=[1.0, 0.0]),
        Neuron(2, "linear", weights=[0.0, 1.0]),
    ])
    x = [Node(2.0), Node(3.0)]
    out = layer(x)
    propagate(out[0] + out[1])
    assert x[0].grad == 1.0 and x[1].grad == 1.0


def test_layer_from_neurons_checks_width():
    with pytest.raises(DimensionMismatch):
        Layer.from_neurons([Neuron(2, weights=[1.0, 1.0]), Neuron(3, weights=[1.0, 1.0, 1.0])])


def test_mlp_shapes_and_parameter_count():
    model = MLP(2, [16, 16, 1], rng=np.random.default_rng(0))
    assert model.n_inputs == 2
    assert model.n_outputs == 1
    assert model.num_parameters() == (2 * 16 + 16) + (16 * 16 + 16) + (16 + 1)
    out = model([0.5, -0.5])
    assert len(out) == 1


def test_mlp_activations_per_layer():
    model = MLP(2, [3, 1], activation="relu", rng=np.random.default_rng(0))
    assert all(n.activation is Activation.RELU for n in model.layers[0].neurons)
    assert model.layers[-1].neurons[0].activation is Activation.LINEAR


def test_mlp_input_width_mismatch():
    model = MLP(3, [2, 1], rng=np.random.default_rng(0))
    with pytest.raises(DimensionMismatch):
        model([1.0, 2.0])


def test_mlp_from_layers_checks_adjacent_widths():
    with pytest.raises(DimensionMismatch):
        MLP.from_layers([Layer(2, 3), Layer(4, 1)])


def test_mlp_parameters_are_stable_and_ordered():
    model = MLP(2, [2, 1], rng=np.random.default_rng(3))
    params = model.parameters()
    assert [id(p) for p in params] == [id(p) for p in model.parameters()]
    first = model.layers[0].neurons[0]
    assert params[:3] == first.weights + [first.bias]
    last = model.layers[-1].neurons[0]
    assert params[-1] is last.bias


def test_mlp_zero_grad():
    model = MLP(2, [2, 1], rng=np.random.default_rng(0))
    propagate(model([1.0, -1.0])[0])
    assert any(p.grad != 0.0 for p in model.parameters())
    model.zero_grad()
    assert all(p.grad == 0.0 for p in model.parameters())


def test_mlp_repeated_forward_accumulates_on_shared_parameters():
    neuron = Neuron(1, "linear", weights=[2.0], bias=0.0)
    model = MLP.from_layers([Layer.from_neurons([neuron])])
    loss = model([1.0])[0] + model([3.0])[0]
    propagate(loss)
    assert neuron.weights[0].grad == 4.0
    assert neuron.bias.grad == 2.0


def test_mlp_from_config_is_deterministic():
    config = MLPConfig(n_inputs=2, layer_sizes=[4, 1], activation="relu", seed=7)
    m1 = MLP.from_config(config)
    m2 = MLP.from_config(config)
    assert [p.value for p in m1.parameters()] == [p.value for p in m2.parameters()]
    assert m1.layers[0].neurons[0].activation is Activation.RELU


def test_mlp_config_validation():
    with pytest.raises(ValueError):
        MLPConfig(layer_sizes=[])
    with pytest.raises(ValueError):
        MLPConfig(layer_sizes=[4, 0])
    with pytest.raises(ValueError):
        MLPConfig(activation="softmax")


def test_mlp_config_scales():
    config = MLPConfig(n_inputs=3, layer_sizes=[5], init_scale=0.1, bias_init=0.5, seed=0)
    model = MLP.from_config(config)
    for neuron in model.layers[0].neurons:
        assert all(abs(w.value) <= 0.1 for w in neuron.weights)
        assert neuron.bias.value == 0.5


def test_mlp_summary_and_repr():
    model = MLP(2, [3, 1], activation="relu", rng=np.random.default_rng(0))
    summary = model.summary()
    assert summary.splitlines()[0] == "MLP:"
    assert summary.count("Neuron: (2, relu)") == 3
    assert "Neuron: (3, linear)" in summary
    assert repr(model).startswith("MLP of [Layer([Neuron(2, relu)")
