"""
Basic options: lookups that may miss, chained without presence checks.

Run: python examples/basic_options.py
"""
from optionpy import Some, NONE, from_nullable, ConsoleLogger, EmptyValueError


USERS = {1: {"name": "ada", "manager": 2}, 2: {"name": "grace"}}


def find_user(uid):
    return from_nullable(USERS.get(uid))


def manager_name(uid, log):
    return (
        find_user(uid)
        .trace("user", log)
        .and_then(lambda u: from_nullable(u.get("manager")))
        .and_then(find_user)
        .map(lambda u: u["name"])
        .trace("manager", log)
    )


def main():
    log = ConsoleLogger(name="example", level="DEBUG")

    print("manager of 1 =>", manager_name(1, log).unwrap_or("nobody"))   # grace
    print("manager of 2 =>", manager_name(2, log).unwrap_or("nobody"))   # nobody

    # Combine two optional values
    width, height = Some(3), from_nullable(None)
    print("area =>", width.zip_with(height, lambda w, h: w * h))        # NONE
    print("xor =>", width.xor(height))                                  # Some(3)

    # Partial unwrap surfaces an error the caller must handle
    try:
        NONE.unwrap()
    except EmptyValueError as e:
        print("unwrap failed =>", e)


if __name__ == "__main__":
    main()
