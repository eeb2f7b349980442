import numpy as np
import pytest

from scalargrad.engine import Value
from scalargrad.nn import MLP, Layer, Module, Neuron


def test_module_has_no_parameters():
    m = Module()
    assert m.parameters() == []
    m.zero_grad()


def test_neuron_linear_output():
    n = Neuron(2, nonlin=False, weights=[0.5, -1.0], bias=0.25)
    out = n([1.0, -2.0])
    assert isinstance(out, Value)
    assert out.data == pytest.approx(2.75)


def test_neuron_relu_clamps_negative():
    n = Neuron(2, weights=[-0.5, 1.0])
    assert n([1.0, -2.0]).data == 0.0
    assert n([0.0, 3.0]).data == 3.0


def test_neuron_default_init():
    n = Neuron(5, rng=np.random.default_rng(0))
    params = n.parameters()
    assert len(params) == 6
    assert all(-1.0 <= w.data <= 1.0 for w in n.w)
    assert n.b.data == 0.0
    assert params[-1] is n.b


def test_neuron_init_is_reproducible_with_seed():
    a = Neuron(3, rng=np.random.default_rng(7))
    b = Neuron(3, rng=np.random.default_rng(7))
    assert [w.data for w in a.w] == [w.data for w in b.w]


@pytest.mark.parametrize("nin", [0, -1, 2.5, True, "3"])
def test_neuron_rejects_bad_nin(nin):
    with pytest.raises(ValueError):
        Neuron(nin)


def test_neuron_rejects_wrong_weight_count():
    with pytest.raises(ValueError):
        Neuron(3, weights=[1.0, 2.0])


def test_neuron_rejects_wrong_input_length():
    n = Neuron(2)
    with pytest.raises(ValueError):
        n([1.0, 2.0, 3.0])


def test_neuron_accepts_value_inputs():
    n = Neuron(2, nonlin=False, weights=[2.0, 3.0])
    x = [Value(1.0), Value(-1.0)]
    out = n(x)
    out.backward()
    assert out.data == -1.0
    assert x[0].grad == 2.0
    assert x[1].grad == 3.0
    assert n.w[0].grad == 1.0
    assert n.b.grad == 1.0


def test_layer_outputs():
    layer = Layer(3, 4, rng=np.random.default_rng(0))
    out = layer([1.0, 2.0, 3.0])
    assert isinstance(out, list) and len(out) == 4
    assert len(layer.parameters()) == 4 * (3 + 1)

    single = Layer(3, 1, rng=np.random.default_rng(0))
    assert isinstance(single([1.0, 2.0, 3.0]), Value)


def test_layer_rejects_bad_sizes():
    with pytest.raises(ValueError):
        Layer(2, 0)
    with pytest.raises(ValueError):
        Layer(2, 2, weights=[[1.0, 2.0]])
    with pytest.raises(ValueError):
        Layer(2, 2, biases=[0.0])


def test_mlp_structure():
    mlp = MLP(2, [16, 16, 1], rng=np.random.default_rng(0))
    assert len(mlp.layers) == 3
    assert len(mlp.parameters()) == (2 + 1) * 16 + (16 + 1) * 16 + (16 + 1)

    assert all(n.nonlin for layer in mlp.layers[:-1] for n in layer.neurons)
    assert not any(n.nonlin for n in mlp.layers[-1].neurons)
    assert isinstance(mlp([0.5, -0.5]), Value)
    assert "MLP[" in repr(mlp)


def test_mlp_multiple_outputs():
    mlp = MLP(3, [4, 2], rng=np.random.default_rng(1))
    out = mlp([1.0, 0.0, -1.0])
    assert isinstance(out, list) and len(out) == 2


def test_mlp_preset_weights():
    mlp = MLP(
        2,
        [2, 1],
        weights=[[[1.0, 0.0], [0.0, 1.0]], [[1.0, -1.0]]],
        biases=[[0.0, 0.0], [0.5]],
    )
    # hidden: relu(3) = 3, relu(-2) = 0; output: 3 - 0 + 0.5
    assert mlp([3.0, -2.0]).data == 3.5


def test_mlp_rejects_empty_layers():
    with pytest.raises(ValueError):
        MLP(2, [])


def test_mlp_rejects_mismatched_preset_lists():
    with pytest.raises(ValueError):
        MLP(2, [2, 1], weights=[[[1.0, 0.0], [0.0, 1.0]]])
    with pytest.raises(ValueError):
        MLP(2, [1], weights=[[[1.0, 0.0]], [[1.0]]])
    with pytest.raises(ValueError):
        MLP(2, [2, 1], biases=[[0.0, 0.0]])


def test_zero_grad_resets_parameters():
    mlp = MLP(2, [3, 1], rng=np.random.default_rng(2))
    out = mlp([1.0, 2.0])
    (out * out).backward()
    mlp.zero_grad()
    assert all(p.grad == 0.0 for p in mlp.parameters())


def test_mlp_gradients_match_central_differences():
    mlp = MLP(3, [4, 4, 1], rng=np.random.default_rng(3))
    x = [0.3, -1.2, 0.8]

    def loss():
        out = mlp(x)
        return out * out + 2 * out

    mlp.zero_grad()
    loss().backward()

    h = 1e-6
    for p in mlp.parameters():
        original = p.data
        p.data = original + h
        up = loss().data
        p.data = original - h
        down = loss().data
        p.data = original
        assert p.grad == pytest.approx((up - down) / (2 * h), rel=1e-5, abs=1e-6)
