# Let's continue with variable declaration and making more simple types.
# In this file we will work with None and booleans.

# ~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~
# 1) Create a function "make_nothing"
# 2) Declare a variable "huh" and assign None to it, then return "huh".
#    NOTE: None means "no value here", which is what this function should return


# ~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~
# 1) Create a function "make_boolean"
# 2) Declare a variable "my_bool" and assign it either True or False, then return "my_bool"
#    NOTE: remember that the string "True" (surrounded by quotes) is not
#          the same thing as boolean True (no quotes)


# ~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~
# 1) Create a function "make_true"
# 2) Declare a variable "yup" and assign boolean True, then return "yup"


# ~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~
# 1) Create a function "make_false"
# 2) Declare a variable "nope" and assign boolean False, then return "nope"


# ~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~
# 1) Create a function "make_null"
# 2) Declare a variable "nothing_much", explicitly assign None to it, then return "nothing_much"
