"""Scan this package, then fetch ``UserComponent`` by name and use it."""

from __future__ import annotations

import beanwire
from examples.ex_01_component_scan.user_component import UserComponent


class Main:
    pass


def main() -> None:
    beanwire.run(Main)

    user_component = beanwire.get_bean("UserComponent")
    if isinstance(user_component, UserComponent):
        user_component.perform_all_operations()
    else:
        print("UserComponent not found in the container!")


if __name__ == "__main__":
    main()
