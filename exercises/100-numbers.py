# Let's start with variables and the simplest type of all: numbers.
# Every function below should declare a variable, assign a value to it and
# then return that variable by name.

# ~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~
# 1) Create a function "make_a_number"
# 2) Declare a variable "my_num" and assign any number to it, then return "my_num"


# ~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~
# 1) Create a function "make_an_integer"
# 2) Declare a variable "my_int" and assign a whole number to it, then return "my_int"


# ~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~
# 1) Create a function "make_a_float"
# 2) Declare a variable "my_float" and assign a number with a fractional part
#    (like 2.5) to it, then return "my_float"


# ~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~
# 1) Create a function "make_zero"
# 2) Declare a variable "zilch" and assign the number 0 to it, then return "zilch"
