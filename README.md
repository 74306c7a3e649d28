# linearkit

Small dense vector and matrix arithmetic written in plain Python, with no
dependencies.

## Installation

```
pip install linearkit
```

## Vectors

A `Vector` holds a list of floats. It can be built from any iterable of
numbers. It supports `len()`, iteration, indexing and `==`.

```python
from linearkit.vector import Vector

v = Vector([1.0, 2.0, 3.0])
w = Vector([4.0, 5.0, 6.0])

v + w              # element-wise sum, as a new vector
v - w              # element-wise difference
v * w              # element-wise product (not a dot or cross product)
v.scaled(2.0)      # new vector with every element multiplied by 2
v.norm()           # Euclidean length
v.sum()            # sum of all elements
v.max()            # largest element

v.add_scalar(15.0) # add 15 to every element, in place
v.scale(0.5)       # multiply every element by 0.5, in place
v += w             # in-place element-wise sum (also -= and *=)

Vector.zeros(4)    # a vector of four zeros
print(v)           # one "[x.xxxxxx]" element per line, as a column
```

The element-wise operators raise `ValueError` when the two vectors differ in
size. `max()` raises `ValueError` on an empty vector, and `Vector.zeros()`
raises `ValueError` for a negative size.

## Matrices

A `Matrix` holds its values in a flat list in row-major order. The number of
values must equal `rows * cols`, or the constructor raises `ValueError`.

```python
from linearkit.matrix import Matrix
from linearkit.vector import Vector

a = Matrix([1, 2, 3, 4], rows=2, cols=2)
b = Matrix.zeros(2, 2)

a.rows, a.cols                # dimensions
a[0, 1]                       # element at row 0, column 1
a @ b                         # matrix product, as a new matrix
a @ Vector([1, 1])            # matrix-vector product, as a new vector
a + b                         # element-wise sum, as a new matrix
a += b                        # element-wise sum, in place
a.scaled(3.0)                 # new matrix with every element multiplied by 3
a.scale(3.0)                  # multiply every element by 3, in place
print(a)                      # one "[x, y, ...]" row per line

v = Vector([1, 1])
a.transform(v)                # replace v's elements with a @ v; returns None
```

`@` raises `ValueError` when the inner dimensions do not match, `+` and `+=`
raise it when the shapes differ, and `transform()` raises it unless the matrix
is square and as wide as the vector is long. Indexing outside the matrix
raises `IndexError`.

## Command line

```
linearkit
```

Runs a short demonstration: it builds the vector `[1, 2, 3]`, adds 15 to every
element, prints the vector as a column and then prints its largest element.
It takes no options.

## What it does not do

The package covers only the operations listed above. There is no dot or cross
product, no transpose, determinant, inverse or decomposition, and no way to
read or save vectors and matrices from files.