'''
# monocubic

Piecewise cubic Hermite interpolation through sorted 1-d breakpoints, with
optional monotonicity-preserving tangents.

 - monocubic.tangents: estimate the tangent (first derivative) at each
   breakpoint with one of six methods: linear, finite-difference, cardinal
   splines, Fritsch-Carlson, Fritsch-Butland, or Steffen (currently an alias
   for finite-difference).
 - monocubic.hermite: evaluate the piecewise cubic Hermite interpolant (or its
   derivative) at arbitrary points within the breakpoint range, or convert it
   to a scipy.interpolate.PPoly object.
'''
