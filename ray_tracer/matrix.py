import torch

from ray_tracer.errors import DimensionMismatch, InvalidShape, NotInvertible, ShapeMismatch
from ray_tracer.utils import EPSILON, float_equals, tensor_equals
from ray_tracer.vector import POINT_W, VECTOR_W, Tuple


class Matrix(object):
    """Rectangular grid of float64 values with a fixed shape.

    Contents may be edited in place with m[row, col] = value, the shape
    never changes. Equality is element-wise within EPSILON.
    """

    def __init__(self, rows):
        rows = [list(row) for row in rows]
        if len(rows) == 0 or len(rows[0]) == 0:
            raise InvalidShape("matrix must have at least one row and one column")
        if any(len(row) != len(rows[0]) for row in rows):
            raise InvalidShape("all matrix rows must have the same length")

        self._data = torch.tensor(rows, dtype=torch.float64)

    @classmethod
    def from_tensor(cls, data: torch.Tensor):
        if data.dim() != 2:
            raise InvalidShape("expected a 2d tensor, got {} dims".format(data.dim()))
        if data.size(0) == 0 or data.size(1) == 0:
            raise InvalidShape("matrix must have at least one row and one column")

        self = cls.__new__(cls)
        self._data = data.to(torch.float64)

        return self

    @classmethod
    def zeros(cls, rows, cols):
        return cls.from_tensor(torch.zeros(rows, cols, dtype=torch.float64))

    @classmethod
    def identity(cls, size=4):
        return cls.from_tensor(torch.eye(size, dtype=torch.float64))

    @property
    def rows(self):
        return self._data.size(0)

    @property
    def cols(self):
        return self._data.size(1)

    @property
    def shape(self):
        return self.rows, self.cols

    @property
    def data(self):
        return self._data.clone()

    def tolist(self):
        return self._data.tolist()

    def _check_bounds(self, row, col):
        if not (0 <= row < self.rows and 0 <= col < self.cols):
            raise IndexError(
                "({}, {}) is out of bounds of a {}x{} matrix".format(row, col, self.rows, self.cols)
            )

    def __getitem__(self, index):
        row, col = index
        self._check_bounds(row, col)

        return self._data[row, col].item()

    def __setitem__(self, index, value):
        row, col = index
        self._check_bounds(row, col)
        self._data[row, col] = value

    def __matmul__(self, other):
        if isinstance(other, Matrix):
            return multiply(self, other)
        if isinstance(other, Tuple):
            w = other.w
            m = multiply(self, to_matrix(other))
            if w == POINT_W:
                return to_point(m)
            else:
                return to_vector(m)

        return NotImplemented

    def transpose(self):
        return transpose(self)

    def determinant(self):
        return determinant(self)

    def inverse(self):
        return inverse(self)

    def translate(self, x, y, z):
        from ray_tracer.transformations import translation

        return translation(x, y, z) @ self

    def scale(self, x, y, z):
        from ray_tracer.transformations import scaling

        return scaling(x, y, z) @ self

    def rotate_x(self, radians):
        from ray_tracer.transformations import rotation_x

        return rotation_x(radians) @ self

    def rotate_y(self, radians):
        from ray_tracer.transformations import rotation_y

        return rotation_y(radians) @ self

    def rotate_z(self, radians):
        from ray_tracer.transformations import rotation_z

        return rotation_z(radians) @ self

    def shear(self, xy, xz, yx, yz, zx, zy):
        from ray_tracer.transformations import shearing

        return shearing(xy, xz, yx, yz, zx, zy) @ self

    def equals(self, other, eps=EPSILON):
        return tensor_equals(self._data, other._data, eps=eps)

    def __eq__(self, other):
        if not isinstance(other, Matrix):
            return NotImplemented

        return self.equals(other)

    __hash__ = None

    def __repr__(self):
        return "Matrix({})".format(self.tolist())


def multiply(a: Matrix, b: Matrix):
    if a.cols != b.rows:
        raise DimensionMismatch(
            "cannot multiply a {}x{} matrix by a {}x{} matrix".format(a.rows, a.cols, b.rows, b.cols)
        )

    return Matrix.from_tensor(a._data @ b._data)


def transpose(m: Matrix):
    return Matrix.from_tensor(m._data.t().contiguous())


def determinant2(m: Matrix):
    if m.shape != (2, 2):
        raise InvalidShape("expected a 2x2 matrix, got {}x{}".format(m.rows, m.cols))

    return _det(m.tolist())


def determinant(m: Matrix):
    if m.rows != m.cols:
        raise InvalidShape("determinant requires a square matrix, got {}x{}".format(m.rows, m.cols))

    return _det(m.tolist())


def submatrix(m: Matrix, row, col):
    m._check_bounds(row, col)

    return Matrix.from_tensor(torch.tensor(_sub(m.tolist(), row, col), dtype=torch.float64))


def minor(m: Matrix, row, col):
    if m.rows != m.cols:
        raise InvalidShape("minor requires a square matrix, got {}x{}".format(m.rows, m.cols))
    if m.rows < 2:
        raise InvalidShape("minor requires at least a 2x2 matrix")
    m._check_bounds(row, col)

    return _det(_sub(m.tolist(), row, col))


def cofactor(m: Matrix, row, col):
    value = minor(m, row, col)
    if (row + col) % 2 == 1:
        value = -value

    return value


def is_invertible(m: Matrix):
    return m.rows == m.cols and determinant(m) != 0


def inverse(m: Matrix):
    if m.rows != m.cols:
        raise NotInvertible("only square matrices are invertible, got {}x{}".format(m.rows, m.cols))

    rows = m.tolist()
    det = _det(rows)
    if det == 0:
        raise NotInvertible("matrix has a zero determinant")

    size = len(rows)
    if size == 1:
        return Matrix([[1 / det]])

    # adjugate: cofactor (r, c) goes to (c, r)
    inv = [[0.0] * size for _ in range(size)]
    for r in range(size):
        for c in range(size):
            inv[c][r] = _cofactor(rows, r, c) / det

    return Matrix(inv)


def to_matrix(t: Tuple):
    return Matrix.from_tensor(t.data.reshape(4, 1))


def to_point(m: Matrix):
    return _to_tuple(m, POINT_W)


def to_vector(m: Matrix):
    return _to_tuple(m, VECTOR_W)


def _to_tuple(m: Matrix, w):
    if m.shape != (4, 1):
        raise ShapeMismatch("expected a 4x1 matrix, got {}x{}".format(m.rows, m.cols))

    data = m._data.reshape(4).clone()
    if not float_equals(data[3].item(), w):
        raise ShapeMismatch("expected w={}, got {}".format(w, data[3].item()))
    data[3] = w

    return Tuple.from_tensor(data)


def _sub(rows, row, col):
    return [[v for c, v in enumerate(r) if c != col] for i, r in enumerate(rows) if i != row]


def _cofactor(rows, row, col):
    value = _det(_sub(rows, row, col))
    if (row + col) % 2 == 1:
        value = -value

    return value


def _det(rows):
    size = len(rows)
    if size == 1:
        return rows[0][0]
    if size == 2:
        return rows[0][0] * rows[1][1] - rows[0][1] * rows[1][0]

    return sum(rows[0][c] * _cofactor(rows, 0, c) for c in range(size))
