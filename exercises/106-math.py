# Let's do some grade-school math.
# Actually: let's have the computer do the math for us :)
# This page may be helpful for this exercise:
# https://docs.python.org/3/library/stdtypes.html#numeric-types-int-float-complex


# ~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~
# Create a function "add99" that takes one argument and adds the number 99 to it.
# You can assume that the argument passed in will be a number value.


# ~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~
# Create a function "add" that takes 2 arguments and sums them together.
# Assume that both arguments are numbers.


# ~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~
# Create a function "difference" that takes 2 number arguments and returns their
# difference.
# ie: the second number subtracted from the first number


# ~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~
# Create a function "multiply" that takes 2 number arguments and returns their
# product.


# ~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~
# Create a function "divide" that takes 2 number arguments and returns the
# division of the first argument by the second.
#
# Python raises ZeroDivisionError when you divide by zero. Instead, follow the
# floating-point rules:
#   - a non-zero number divided by 0 is infinity: math.inf (or -math.inf)
#   - 0 divided by 0 is "not a number": math.nan

import math


def divide(a, b):
    return a / b


# ~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~
# The modulus operator (%) works like remainder from division.
# Create a function "mod" that takes 2 number arguments and returns the
# remainder of the first divided by the second.
# When the second argument is 0, return math.nan.
