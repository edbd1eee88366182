class RayTracerError(Exception):
    pass


class InvalidHomogeneousCoordinate(RayTracerError, ValueError):
    def __init__(self, w):
        super().__init__("w must be either 0.0 or 1.0, got {}".format(w))
        self.w = w


class DimensionMismatch(RayTracerError, ValueError):
    pass


class InvalidShape(RayTracerError, ValueError):
    pass


class NotInvertible(RayTracerError, ArithmeticError):
    pass


class ShapeMismatch(RayTracerError, ValueError):
    pass


class DegenerateVector(RayTracerError, ArithmeticError):
    pass
