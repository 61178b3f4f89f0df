from __future__ import annotations

from dataclasses import dataclass
from typing import Iterator, Sequence

import numpy as np

from .errors import FormatError

MAGIC_BYTE = 0xFF
CURV_MAGIC = 16777215     # the three magic bytes read as one 24-bit integer
HEADER_SIZE = 15          # 3 x uint8 + 3 x int32
VALUE_SIZE = 4            # float32


@dataclass(frozen=True)
class CurvHeader:
    """
    Header of a file in Curv format.
    - num_vertices:      number of float32 values that follow the header
    - num_faces:         informational, 0 unless the writer recorded a face count
    - values_per_vertex: always 1 for files written by this package
    - magic_b1..b3:      must all be 0xFF
    """
    num_vertices: int
    num_faces: int = 0
    values_per_vertex: int = 1
    magic_b1: int = MAGIC_BYTE
    magic_b2: int = MAGIC_BYTE
    magic_b3: int = MAGIC_BYTE

    @property
    def magic(self) -> bytes:
        return bytes((self.magic_b1, self.magic_b2, self.magic_b3))

    @property
    def has_valid_magic(self) -> bool:
        return self.magic_b1 == MAGIC_BYTE and self.magic_b2 == MAGIC_BYTE and self.magic_b3 == MAGIC_BYTE

    @property
    def file_size(self) -> int:
        """Exact size in bytes of a file carrying this header."""
        return HEADER_SIZE + VALUE_SIZE * int(self.num_vertices)

    @staticmethod
    def for_values(num_vertices: int) -> "CurvHeader":
        """Header the writer emits for ``num_vertices`` values."""
        return CurvHeader(num_vertices=int(num_vertices), num_faces=0, values_per_vertex=1)


@dataclass(eq=False)
class CurvFile:
    """
    Per-vertex surface data in Curv format.

    Contains:
        - header: CurvHeader
        - values: (N,) float32 array, one value per mesh vertex, in the same
                  order as the vertices of the companion surface file
    """
    header: CurvHeader
    values: np.ndarray

    def __post_init__(self) -> None:
        self.values = np.asarray(self.values, dtype=np.float32)
        if self.values.ndim != 1:
            raise FormatError(f"Curv values must be 1D, got shape {self.values.shape}.")
        if self.values.shape[0] != self.header.num_vertices:
            raise FormatError(
                f"Header declares {self.header.num_vertices} vertices but {self.values.shape[0]} values were given."
            )

    @staticmethod
    def from_values(values: Sequence[float]) -> "CurvFile":
        arr = np.asarray(values, dtype=np.float32).reshape(-1)
        return CurvFile(header=CurvHeader.for_values(arr.shape[0]), values=arr)

    def __len__(self) -> int:
        return int(self.values.shape[0])

    def __getitem__(self, idx):
        return self.values[idx]

    def __iter__(self) -> Iterator[np.float32]:
        return iter(self.values)

    def __str__(self) -> str:
        return f"FreeSurfer per-vertex brain surface data for {len(self)} vertices."
