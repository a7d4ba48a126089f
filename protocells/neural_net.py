"""A small fixed-shape integer neural net driven by a byte string."""

from __future__ import annotations

LAYER_WIDTH = 16
NUM_CONNECTIONS = 4
NUM_LAYERS = 3
TOTAL_SIZE = NUM_LAYERS * NUM_CONNECTIONS * LAYER_WIDTH
WORKSPACE_SIZE = LAYER_WIDTH * (NUM_LAYERS + 1)
OUTPUT_OFFSET = LAYER_WIDTH * NUM_LAYERS


def _int32(value: int) -> int:
    value &= 0xFFFFFFFF
    return value - 0x100000000 if value & 0x80000000 else value


def char_to_indices(idx_code: int) -> tuple[int, int]:
    """Split a byte-sized code into two positions within one layer."""
    code = idx_code & 0xFF
    return code % LAYER_WIDTH, (code // LAYER_WIDTH) % LAYER_WIDTH


class NeuralNet:
    """Feed-forward net with ReLU gating and four outgoing links per node.

    Each connection byte encodes a destination (high nibble) in the next
    layer and a multiplier (low nibble minus 7).
    """

    def __init__(self) -> None:
        self.net_layers: list[int] = [0] * TOTAL_SIZE
        self.workspace: list[int] = [0] * WORKSPACE_SIZE

    def load(self, data: bytes | bytearray | str) -> None:
        """Take connection bytes from ``data``; each is read as a signed byte."""
        if isinstance(data, str):
            data = data.encode("latin-1")
        if len(data) < TOTAL_SIZE:
            raise ValueError(f"net data needs {TOTAL_SIZE} bytes, got {len(data)}")
        self.net_layers = [b - 256 if b > 127 else b for b in data[:TOTAL_SIZE]]

    def run(self) -> None:
        """Propagate the input layer through the net, then clear the inputs."""
        ws = self.workspace
        ws[LAYER_WIDTH:OUTPUT_OFFSET] = [0] * (OUTPUT_OFFSET - LAYER_WIDTH)
        for layer in range(NUM_LAYERS):
            next_base = (layer + 1) * LAYER_WIDTH
            for node in range(layer * LAYER_WIDTH, next_base):
                if ws[node] <= 0:
                    continue
                start = node * NUM_CONNECTIONS
                for raw in self.net_layers[start:start + NUM_CONNECTIONS]:
                    value = raw & 0xFF
                    destination = next_base + value // 16
                    multiplier = value % 16 - 7
                    ws[destination] = _int32(ws[node] * multiplier)
        ws[:LAYER_WIDTH] = [0] * LAYER_WIDTH

    def output_for(self, idx_code: int) -> int:
        """Sum of the two output nodes addressed by ``idx_code``."""
        first, second = char_to_indices(idx_code)
        return _int32(
            self.workspace[OUTPUT_OFFSET + first] + self.workspace[OUTPUT_OFFSET + second]
        )

    def add_input(self, idx_code: int, value: int) -> None:
        """Add ``value`` to both input nodes addressed by ``idx_code``."""
        first, second = char_to_indices(idx_code)
        self.workspace[first] = _int32(self.workspace[first] + value)
        self.workspace[second] = _int32(self.workspace[second] + value)