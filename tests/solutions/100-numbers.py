def make_a_number():
    my_num = 42
    return my_num


def make_an_integer():
    my_int = 7
    return my_int


def make_a_float():
    my_float = 2.5
    return my_float


def make_zero():
    zilch = 0
    return zilch
