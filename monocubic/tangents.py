import enum

import numpy

class Method(enum.Enum):
    """Strategies for estimating the tangent (first derivative) at each
    breakpoint of a cubic Hermite interpolant.

        LINEAR: piecewise-linear interpolation; tangents are not used.
        FINITE_DIFFERENCE: classic cubic interpolation: interior tangents are
            the mean of the adjacent secants.
        CARDINAL: cardinal splines, controlled by a tension parameter in [0, 1].
        FRITSCH_CARLSON: monotonic. Tangents are initialized to the mean of the
            adjacent secants and then adjusted if they would allow overshoot.
        FRITSCH_BUTLAND: monotonic in a single pass, via a weighted harmonic
            mean of the adjacent secants. Somewhat higher apparent "tension"
            than FRITSCH_CARLSON.
        STEFFEN: currently identical to FINITE_DIFFERENCE. Steffen's (1990)
            parabolic estimate is not implemented, so no monotonicity is
            guaranteed.

    References:
        Fritsch & Carlson (1980), "Monotone Piecewise Cubic Interpolation",
            doi:10.1137/0717021.
        Fritsch & Butland (1984), "A Method for Constructing Local Monotone
            Piecewise Cubic Interpolants", doi:10.1137/0905021.
    """
    LINEAR = 'linear'
    FINITE_DIFFERENCE = 'finitedifference'
    CARDINAL = 'cardinal'
    FRITSCH_CARLSON = 'fritschcarlson'
    FRITSCH_BUTLAND = 'fritschbutland'
    STEFFEN = 'steffen'

    @classmethod
    def parse(cls, method):
        """Return the Method named by a case-insensitive string such as
        'FritschCarlson' or 'fritsch_carlson'. Method members pass through."""
        if isinstance(method, cls):
            return method
        name = str(method).lower().replace('_', '')
        try:
            return cls(name)
        except ValueError:
            valid = ', '.join(repr(m.value) for m in cls)
            raise ValueError(f'Unknown interpolation method {method!r}. Valid methods are: {valid}.') from None

    def interior_tangents(self, x, y, delta, tension=0):
        """Return the tangents at breakpoints 1 through n-2 for this method."""
        return _INTERIOR_TANGENTS[self](x, y, delta, tension)


def check_breakpoints(x, y):
    """Convert x and y to float arrays and make sure they describe a valid set
    of breakpoints: 1-d, of equal length, at least two points, and with
    strictly increasing x-values.

    Returns x, y as numpy arrays."""
    x = numpy.asarray(x, dtype=float)
    y = numpy.asarray(y, dtype=float)
    if x.ndim != 1 or y.ndim != 1:
        raise ValueError('Breakpoint x and y values must be 1-dimensional.')
    if len(x) != len(y):
        raise ValueError(f'Breakpoint x and y values must have the same length (got {len(x)} and {len(y)}).')
    if len(x) < 2:
        raise ValueError('At least two breakpoints are required.')
    if not (numpy.diff(x) > 0).all():
        raise ValueError('Breakpoint x values must be strictly increasing.')
    return x, y


def secants(x, y):
    """Return the slopes of the line segments between consecutive breakpoints.

    Parameters:
        x, y: 1-d arrays of n breakpoints, with x strictly increasing.

    Returns: array of length n-1.
    """
    x, y = check_breakpoints(x, y)
    return numpy.diff(y) / numpy.diff(x)


def estimate_tangents(x, y, method='finitedifference', tension=0):
    """Estimate the derivative of a cubic Hermite interpolant at each breakpoint.

    The tangents at the first and last breakpoints are the adjacent secant
    slopes, for all methods. (The Fritsch-Carlson adjustment pass may then
    shrink them along with the interior tangents.)

    Parameters:
        x, y: 1-d arrays of n breakpoints, with x strictly increasing. Sorting
            is the caller's responsibility.
        method: a Method member or a case-insensitive method name, one of
            'linear', 'finitedifference', 'cardinal', 'fritschcarlson',
            'fritschbutland', or 'steffen'. See the Method class.
        tension: tension parameter for cardinal splines, nominally in [0, 1]:
            0 gives Catmull-Rom splines and 1 gives zero interior tangents.
            Ignored for the other methods.

    Returns: m, delta
        m: array of n tangents, one per breakpoint.
        delta: array of n-1 secant slopes, one per segment.
    """
    method = Method.parse(method)
    x, y = check_breakpoints(x, y)
    delta = numpy.diff(y) / numpy.diff(x)
    m = numpy.empty_like(x)
    m[0] = delta[0]
    m[-1] = delta[-1]
    m[1:-1] = method.interior_tangents(x, y, delta, tension)
    if method is Method.FRITSCH_CARLSON:
        _fritsch_carlson_limit(m, delta)
    return m, delta


def _secant_tangents(x, y, delta, tension):
    # placeholder: linear interpolation uses the secants directly
    return delta[1:]

def _finite_difference_tangents(x, y, delta, tension):
    return (delta[:-1] + delta[1:]) / 2

def _cardinal_tangents(x, y, delta, tension):
    return (1 - tension) * (y[2:] - y[:-2]) / (x[2:] - x[:-2])

def _fritsch_carlson_tangents(x, y, delta, tension):
    # If consecutive secants change sign (the curve changes direction), start
    # the tangent at zero. _fritsch_carlson_limit() fixes up the rest.
    m = (delta[:-1] + delta[1:]) / 2
    m[delta[:-1] * delta[1:] < 0] = 0
    return m

def _fritsch_butland_tangents(x, y, delta, tension):
    d0 = delta[:-1]
    d1 = delta[1:]
    # weight toward the shorter of the two adjacent segments
    alpha = (1 + (x[2:] - x[1:-1]) / (x[2:] - x[:-2])) / 3
    m = numpy.zeros_like(d0)
    same_sign = d0 * d1 > 0
    d0, d1, alpha = d0[same_sign], d1[same_sign], alpha[same_sign]
    m[same_sign] = d0 * d1 / (alpha * d1 + (1 - alpha) * d0)
    return m

_INTERIOR_TANGENTS = {
    Method.LINEAR: _secant_tangents,
    Method.FINITE_DIFFERENCE: _finite_difference_tangents,
    Method.CARDINAL: _cardinal_tangents,
    Method.FRITSCH_CARLSON: _fritsch_carlson_tangents,
    Method.FRITSCH_BUTLAND: _fritsch_butland_tangents,
    # TODO: replace with Steffen's min(|d0|, |d1|, |p|/2) sign-matched estimate
    Method.STEFFEN: _finite_difference_tangents,
}


def _fritsch_carlson_limit(m, delta):
    """Adjust tangents in-place so that each segment is monotonic.

    With alpha = m[k]/delta[k] and beta = m[k+1]/delta[k], a segment is
    monotonic if (alpha, beta) lies within the circle of radius 3 around the
    origin. Tangent pairs outside the circle are moved onto it. Segments are
    visited in order, and each sees the tangents as adjusted by the previous
    segment.
    """
    for k, dk in enumerate(delta):
        if dk == 0:
            m[k] = m[k+1] = 0
            continue
        alpha = m[k] / dk
        beta = m[k+1] / dk
        radius = numpy.hypot(alpha, beta)
        if radius > 3:
            tau = 3 / radius
            m[k] = tau * alpha * dk
            m[k+1] = tau * beta * dk
