import numpy
from scipy import interpolate as scipy_interpolate

from . import tangents

class OutOfRangeError(ValueError):
    """Raised when a query point lies outside the breakpoint range. No
    extrapolation is ever attempted.

    Attributes:
        value: the offending query value.
        index: position of that value in the flattened query array.
        bounds: (first, last) breakpoint x-values.
    """
    def __init__(self, value, index, bounds):
        self.value = value
        self.index = index
        self.bounds = bounds
        super().__init__(f'x value {value} (position {index}) outside breakpoint range [{bounds[0]}, {bounds[1]}]')


def hermite_coefficients(x, y, method='finitedifference', tension=0):
    """Calculate the power-basis coefficients of a piecewise cubic Hermite
    interpolant through the given breakpoints.

    On segment k, the interpolant is:
        f(t) = y[k] + m[k]*dx + c[k]*dx**2 + d[k]*dx**3,  where dx = t - x[k]

    Parameters:
        x, y: 1-d arrays of n breakpoints, with x strictly increasing.
        method, tension: tangent-estimation method and cardinal-spline
            tension. See tangents.estimate_tangents().

    Returns: m, c, d
        m: array of n tangents. For the linear method, the first n-1 are
            replaced by the secant slopes.
        c, d: arrays of n-1 quadratic and cubic coefficients.
    """
    method = tangents.Method.parse(method)
    x, y = tangents.check_breakpoints(x, y)
    m, delta = tangents.estimate_tangents(x, y, method, tension)
    if method is tangents.Method.LINEAR:
        m[:-1] = delta
        c = numpy.zeros_like(delta)
        d = numpy.zeros_like(delta)
    else:
        w = numpy.diff(x)
        c = (3*delta - 2*m[:-1] - m[1:]) / w
        d = (m[:-1] + m[1:] - 2*delta) / w**2
    return m, c, d


class HermiteInterpolator(object):
    """Piecewise cubic Hermite interpolant through a set of sorted breakpoints.

    Coefficients are calculated once at construction; the object can then be
    called repeatedly to evaluate the curve, e.g.:

        f = HermiteInterpolator(x, y, 'fritschcarlson')
        values = f(numpy.linspace(x[0], x[-1], 200))
        slopes = f.derivative(x)

    Parameters:
        x, y: 1-d arrays of n breakpoints, with x strictly increasing.
        method, tension: see tangents.estimate_tangents().
    """
    def __init__(self, x, y, method='finitedifference', tension=0):
        self.x, self.y = tangents.check_breakpoints(x, y)
        self.method = tangents.Method.parse(method)
        self.tension = tension
        self.m, self.c, self.d = hermite_coefficients(self.x, self.y, self.method, tension)

    def __call__(self, x_eval, strict=True):
        """Evaluate the interpolant at the point (or points) in x_eval.
        See interpolate() for details."""
        return self._evaluate(x_eval, strict, derivative=False)

    def derivative(self, x_eval, strict=True):
        """Evaluate the first derivative of the interpolant at the point (or
        points) in x_eval. See interpolate_derivative() for details."""
        return self._evaluate(x_eval, strict, derivative=True)

    def to_ppoly(self):
        """Return an equivalent scipy.interpolate.PPoly, which does not extrapolate."""
        coefficients = numpy.array([self.d, self.c, self.m[:-1], self.y[:-1]])
        return scipy_interpolate.PPoly(coefficients, self.x, extrapolate=False)

    def _evaluate(self, x_eval, strict, derivative):
        x_eval = numpy.asarray(x_eval, dtype=float)
        x, y, m = self.x, self.y, self.m
        xs = x_eval.ravel()
        outside = (xs < x[0]) | (xs > x[-1])
        if strict and outside.any():
            index = numpy.flatnonzero(outside)[0]
            raise OutOfRangeError(xs[index], index, (x[0], x[-1]))
        # side='right' puts a query equal to x[k] at the start of segment k,
        # where dx is exactly zero. The zero-length segment appended at x[-1]
        # does the same for the last breakpoint.
        k = numpy.searchsorted(x, xs, side='right') - 1
        k = k.clip(0, len(x) - 1)
        c = numpy.append(self.c, 0)[k]
        d = numpy.append(self.d, 0)[k]
        dx = xs - x[k]
        if derivative:
            out = m[k] + dx * (2*c + 3*d*dx)
        else:
            out = y[k] + dx * (m[k] + dx * (c + dx*d))
        out[outside] = numpy.nan
        out = out.reshape(x_eval.shape)
        if out.ndim == 0:
            return out.item()
        return out


def interpolate(x_eval, x, y, method='finitedifference', tension=0, strict=True):
    """Interpolate with cubic Hermite splines through the breakpoints x, y,
    evaluated at the points in x_eval.

    Parameters:
        x_eval: scalar or array of points at which to evaluate the curve. The
            points need not be sorted.
        x, y: 1-d arrays of n breakpoints, with x strictly increasing. Sorting
            is the caller's responsibility.
        method: a tangents.Method member or case-insensitive name:
            'linear'            piecewise-linear interpolation
            'finitedifference'  classic cubic interpolation
            'cardinal'          cardinal splines; uses the tension parameter
            'fritschcarlson'    monotonic: tangents are first initialized, then
                                adjusted if they are not monotonic
            'fritschbutland'    monotonic: one pass, but somewhat higher
                                apparent "tension"
            'steffen'           currently the same as 'finitedifference'
        tension: cardinal-spline tension, nominally in [0, 1]. Ignored for the
            other methods.
        strict: if True, raise OutOfRangeError for the first point in x_eval
            outside [x[0], x[-1]]. If False, such points evaluate to nan.

    Returns: interpolated values with the same shape as x_eval (a float if
        x_eval is a scalar).
    """
    return HermiteInterpolator(x, y, method, tension)(x_eval, strict)


def interpolate_derivative(x_eval, x, y, method='finitedifference', tension=0, strict=True):
    """Evaluate the first derivative of the cubic Hermite interpolant through
    the breakpoints x, y at the points in x_eval.

    At an interior breakpoint the derivative is taken from the segment to its
    right; this only matters for the linear method, whose derivative is
    discontinuous there. Parameters are as for interpolate().
    """
    return HermiteInterpolator(x, y, method, tension).derivative(x_eval, strict)


def to_ppoly(x, y, method='finitedifference', tension=0):
    """Return the cubic Hermite interpolant through the breakpoints x, y as a
    scipy.interpolate.PPoly object, for access to scipy's derivative, integral,
    and root-finding tools. The PPoly evaluates to nan outside [x[0], x[-1]].
    """
    return HermiteInterpolator(x, y, method, tension).to_ppoly()
