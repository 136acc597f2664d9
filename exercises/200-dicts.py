# DICTIONARIES

# Create a function called get_value(). It should take two inputs: a dictionary (user) and a key.
# It should return the corresponding value for that key within the dictionary.
user = {
    "id": 1,
    "first_name": "Wittie",
    "last_name": "Armall",
    "email": "warmall0@earthlink.net",
    "gender": "Male",
    "ip_address": "60.13.194.247",
}


# Create a function called add_prop(). It should take three inputs: a dictionary (user2), a key, and a value.
# It should return the original dictionary, plus a new key-value pair corresponding to the input.
user2 = {
    "id": 2,
    "first_name": "Allys",
    "last_name": "Maceur",
    "email": "amaceur1@youtube.com",
    "gender": "Female",
    "ip_address": "190.63.227.21",
}


# Create a function called get_keys(). It should take a dictionary as input,
# and it should return a LIST of the names of all the keys of the dictionary.
user3 = {
    "id": 3,
    "first_name": "Micah",
    "last_name": "Cockney",
    "email": "mcockney2@cafepress.com",
    "gender": "Male",
    "ip_address": "44.60.248.14",
}
