# Let's venture into Python strings in this exercise.
# Hold onto your hats: we will be using functions with parameters here too.

# ~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~
# 1) Create a function "hello_world"
# 2) Return the string "Hello, world!"


# ~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~
# 1) Create a function "hello_name" that accepts 1 parameter (arity of 1)
# 2) Use the symbol "name" for the parameter name
# 3) Return the string "Hello, <name>!" where <name> is the value passed to the function

def hello_name(name):
    pass


# ~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~
# Return the length of the string "tar_pit_abstract" defined below.
# HINT: use the len() function
# https://docs.python.org/3/library/functions.html#len

def abstract_length():
    tar_pit_abstract = (
        'Complexity is the single major difficulty in the successful development of large-scale software systems. '
        'Following Brooks we distinguish accidental from essential difficulty, but disagree with his premise that most complexity remaining in contemporary systems is essential. '
        'We identify common causes of complexity and discuss general approaches which can be taken to eliminate them where they are accidental in nature. '
        'To make things more concrete we then give an outline for a potential complexity-minimizing approach based on functional programming and Codd’s relational model of data.'
    )


# ~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~
# Return the string "chorus" in all capital letters.
# HINT: use the .upper() method
# https://docs.python.org/3/library/stdtypes.html#str.upper

def make_loud():
    chorus = 'Who let the dogs out?'


# ~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~
# Assume that a string is passed to the parameter "text" in the function below.
# Return the value of "text" in all lower case letters.
# HINT: use the .lower() method
# https://docs.python.org/3/library/stdtypes.html#str.lower

def make_quiet(text):
    pass
