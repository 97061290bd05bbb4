#
# 2D simplex noise with octave layering for tile world terrain.
#
# Based on example code by Stefan Gustavson (stegu@itn.liu.se).
# Optimisations by Peter Eastman (peastman@drizzle.stanford.edu).
#
# This code was placed in the public domain by its original author,
# Stefan Gustavson. You may use it as you see fit, but
# attribution is appreciated.
#
#
import numpy

from errors import ConfigurationError


grad3 = numpy.array([(1,1,0),(-1,1,0),(1,-1,0),(-1,-1,0),
                     (1,0,1),(-1,0,1),(1,0,-1),(-1,0,-1),
                     (0,1,1),(0,-1,1),(0,1,-1),(0,-1,-1)])

# Skewing and unskewing factors for 2 dimensions
F2 = 0.5*(3.0**0.5-1.0)
G2 = (3.0-3.0**0.5)/6.0

# Must be a power of two; lattice indices are masked with PERM_SIZE - 1.
PERM_SIZE = 512


def make_rng(seed=None):
    """Return a numpy Generator for `seed` (an int, None, or an existing Generator)."""
    if isinstance(seed, numpy.random.Generator):
        return seed
    return numpy.random.default_rng(seed)


def shuffled_permutation(rng, size=PERM_SIZE):
    """Forward Fisher-Yates shuffle of 0..size-1: slot i swaps with a random slot in [i, size)."""
    p = numpy.arange(size, dtype=numpy.int64)
    for i in range(size):
        r = int(rng.integers(i, size))
        p[i], p[r] = p[r], p[i]
    return p


# returns floor of floating point array by coercing to integer
def fastfloor(x):
    return numpy.array(numpy.floor(x), dtype=numpy.int64)


def _corner(gi, dx, dy):
    t = 0.5 - dx*dx - dy*dy
    t = numpy.where(t < 0, 0.0, t)
    t = t*t
    return t * t * (grad3[gi, 0]*dx + grad3[gi, 1]*dy)


def _as_result(value):
    if numpy.ndim(value) == 0:
        return float(value)
    return value


class SimplexNoise(object):
    """
    Continuous 2D gradient noise in [-1, 1].

    The permutation table is shuffled from `rng` so two instances built from
    the same generator stream are independent fields. Coordinates may be
    python floats or numpy arrays of any matching shape.
    """
    def __init__(self, rng=None):
        self.rng = make_rng(rng)
        p = shuffled_permutation(self.rng)
        # To remove the need for index wrapping, double the permutation table length
        self.perm = numpy.concatenate([p, p])
        self.perm_mod12 = self.perm % 12

    def noise(self, xin, yin):
        xin = numpy.asarray(xin, dtype=numpy.float64)
        yin = numpy.asarray(yin, dtype=numpy.float64)
        # Skew the input space to determine which simplex cell we're in
        s = (xin+yin)*F2 # Hairy factor for 2D
        i = fastfloor(xin+s)
        j = fastfloor(yin+s)
        t = (i+j)*G2
        X0 = i-t # Unskew the cell origin back to (x,y) space
        Y0 = j-t
        x0 = xin-X0 # The x,y distances from the cell origin
        y0 = yin-Y0
        # For the 2D case, the simplex shape is an equilateral triangle.
        # Determine which simplex we are in.
        i1 = (x0>y0).astype(numpy.int64) # lower triangle, XY order: (0,0)->(1,0)->(1,1)
        j1 = 1 - i1 # upper triangle, YX order: (0,0)->(0,1)->(1,1)
        x1 = x0 - i1 + G2 # Offsets for middle corner in (x,y) unskewed coords
        y1 = y0 - j1 + G2
        x2 = x0 - 1.0 + 2.0 * G2 # Offsets for last corner in (x,y) unskewed coords
        y2 = y0 - 1.0 + 2.0 * G2

        # Work out the hashed gradient indices of the three simplex corners.
        # Mask by the full permutation size so the hash repeats with the table.
        perm = self.perm
        ii = i & (PERM_SIZE - 1)
        jj = j & (PERM_SIZE - 1)
        gi0 = self.perm_mod12[ii+perm[jj]]
        gi1 = self.perm_mod12[ii+i1+perm[jj+j1]]
        gi2 = self.perm_mod12[ii+1+perm[jj+1]]

        n0 = _corner(gi0, x0, y0)
        n1 = _corner(gi1, x1, y1)
        n2 = _corner(gi2, x2, y2)

        # Add contributions from each corner to get the final noise value.
        # The result is scaled to return values in the interval [-1,1].
        return _as_result(70.0 * (n0 + n1 + n2))


def octave(field, x, y, octaves, amplitude=1.0, frequency=1.0, persistence=0.5, lacunarity=2.0):
    """Sum `octaves` layers of `field` and rescale the total back into [-1, 1].

    Each layer is remapped to [0, 1] and weighted by the current amplitude.
    The running min/max of the weighted layers start at 0 and 1, so with
    sane parameters the normalisation denominator stays positive; anything
    else is reported as a ConfigurationError rather than returning NaN.
    """
    if octaves < 1:
        raise ConfigurationError(f"octave count must be at least 1, got {octaves}")
    result = 0.0
    lo = 0.0
    hi = 1.0
    for _ in range(octaves):
        s = (field.noise(x*frequency, y*frequency)*0.5 + 0.5)*amplitude
        result = result + s
        lo = numpy.minimum(lo, s)
        hi = numpy.maximum(hi, s)
        amplitude *= persistence
        frequency *= lacunarity
    denom = hi*octaves - lo*octaves
    if numpy.any(denom == 0) or not numpy.all(numpy.isfinite(denom)):
        raise ConfigurationError(
            f"octave normalisation is degenerate (octaves={octaves}, persistence={persistence})")
    return _as_result(((result - lo*octaves) / denom)*2 - 1)


def smoothstep(t):
    return 6*t**5 - 15*t**4 + 10*t**3


def interpolate(a, b, t):
    return a + smoothstep(t)*(b - a)


def interpolated_octave(field, x, y, octaves=1, amplitude=1.0, frequency=1.0, persistence=0.5, lacunarity=2.0):
    """Octave noise at the four lattice corners around (x, y), blended with `smoothstep`."""
    fx = numpy.floor(x)
    fy = numpy.floor(y)
    tx = x - fx
    ty = y - fy
    args = (octaves, amplitude, frequency, persistence, lacunarity)
    v00 = octave(field, fx, fy, *args)
    v01 = octave(field, fx, fy+1, *args)
    v10 = octave(field, fx+1, fy, *args)
    v11 = octave(field, fx+1, fy+1, *args)
    i1 = interpolate(v00, v10, tx)
    i2 = interpolate(v01, v11, tx)
    return _as_result(interpolate(i1, i2, ty))
