# Lists are ordered collections of things. You use them all the time in programming.
#
# Useful reference:
# https://docs.python.org/3/tutorial/datastructures.html#more-on-lists

# ~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~
# You can create a list using the [] characters.
# Note the commas between the items.
# Return the list of fruit strings in the function below.

def three_fruits():
    fruits = ['Apple', 'Banana', 'Cherry']


# ~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~
# A list can contain multiple types. ie: strings, numbers, booleans, etc
# Return the list of values in the function below.

def multiple_types():
    diverse_list = ['Skateboard', None, 8.75, 'Eiffel Tower', 44, 7, True, None]


# ~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~
# You can access individual values of a list using bracket notation shown below.
# Remember that lists start at index 0. So for a list "my_list" the *first* item can
# be accessed at my_list[0].
# Return the third item from the list "people" below.

def index_access():
    people = ['Jenny', 'James', 'Jimmy', 'Jonny', 'Julia', 'Jessica']

    # assert allows you to declare things that should be true; it's like
    # a sanity-check for your code.
    # Here we are confirming that list access works like we expect:
    assert people[0] == 'Jenny'
    assert people[4] == 'Julia'

    # return the third item from the "people" list here


# ~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~
# Use the len() function to see the length of a list.
# Return the length of list "items" below.

def use_len():
    items = ['a', 'b', 'c']


# ~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~
# Add to the end of a list using the .append() method
# Add the string "d" to the list below and return the list.

def use_append():
    items = ['a', 'b', 'c']


# ~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~
# Remove from the end of a list using the .pop() method
# Remove the last element of the list below and return the list.

def use_pop():
    items = ['a', 'b', 'c']


# ~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~
# You can search a list using the .index() method
# my_list.index(<thing>) will return the first index of <thing> in my_list.
# Return the index of the first instance of "T" in the list below.

def use_index():
    bases = ['C', 'A', 'G', 'T', 'A', 'A', 'G', 'T']

    # some demonstration of how .index() works:
    assert bases.index('C') == 0
    assert bases.index('A') == 1  # note this only returns the *first* instance of 'A'

    # return the index of the first instance of "T" here


# ~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~
# Convert a list of strings into a single string using str.join()
# Return the string 'a-b-c-d-e-f' using .join() below

def use_join():
    letters = ['a', 'b', 'c', 'd', 'e', 'f']

    # some examples of .join():
    assert ','.join(letters) == 'a,b,c,d,e,f'
    assert 'ZZZ'.join(letters) == 'aZZZbZZZcZZZdZZZeZZZf'
    assert ''.join(letters) == 'abcdef'  # an empty separator glues the items together

    # create and return the string 'a-b-c-d-e-f' here


# ~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~
# Let's play with the alphabet using some list and string methods.
#
# There is no test to write here; just try to follow what the code is doing
# and see if you can understand the assert statements below.

alphabet_string = 'abcdefghijklmnopqrstuvwxyz'
alphabet_list = list(alphabet_string)

# both strings and lists have a length:
assert len(alphabet_string) == 26
assert len(alphabet_list) == 26

# reverse our alphabet list
reverse_alphabet_list = list(reversed(alphabet_list))

assert reverse_alphabet_list[0] == 'z'
assert reverse_alphabet_list[25] == 'a'
assert reverse_alphabet_list.index('z') == 0
assert reverse_alphabet_list.index('a') == 25

# join it back into a string
reverse_alphabet_string = ''.join(reverse_alphabet_list)

# strings have an .upper() method, remember?
uppercase_reverse_alphabet_string = reverse_alphabet_string.upper()

assert uppercase_reverse_alphabet_string == 'ZYXWVUTSRQPONMLKJIHGFEDCBA'

# strings have a .find() method that returns -1 when nothing is found:
assert uppercase_reverse_alphabet_string.find('Z') == 0
assert uppercase_reverse_alphabet_string.find('A') == 25
assert uppercase_reverse_alphabet_string.find('b') == -1
