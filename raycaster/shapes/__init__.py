"""Shapes that rays can intersect: spheres, planes, cylinders and cones."""