# Dictionaries are key => value pairs of things. Similar to a JavaScript Object
# or a Ruby Hash.
#
# https://docs.python.org/3/tutorial/datastructures.html#dictionaries

# ~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~
# You can create a dictionary using the {} characters.
# Create a function "three_numbers" that returns a dictionary with the keys
# "number_one", "number_two" and "number_three" mapped to 1, 2 and 3.


# ~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~
# A dictionary can hold values of different types.
# Create a function "many_types" that returns a dictionary with the keys
# "name" ('banana'), "count" (42) and "delicious" (True).


# ~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~
# Use bracket notation to read a value: fruit["name"]
# Return the "name" of the fruit below.

def key_access():
    fruit = {'name': 'banana', 'count': 42, 'delicious': True}


# ~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~
# Use bracket notation to add a new key.
# Add the key "color" with the value 'yellow' to "best_fruit" and return "best_fruit".

def add_key():
    best_fruit = {'name': 'banana', 'count': 42, 'delicious': True}


# ~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~
# Create a function "large_dict". Inside it declare a dictionary called
# "bootcamp_student" describing yourself with exactly 8 keys, then return it.


# ~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~
# Dictionaries can hold lists.
# Return the second item of the "favorite_foods" list. Remember lists start counting at 0.

def nested_list():
    person = {'name': 'Chris', 'favorite_foods': ['pizza', 'salmon', 'tacos']}


# ~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~
# Dictionaries can hold other dictionaries.
# Return the name of the bootcamp instructor.

def nested_lookup():
    bootcamp = {
        'city': 'Houston',
        'instructor': {'name': 'Susan', 'languages': ['Python', 'JavaScript']},
    }
