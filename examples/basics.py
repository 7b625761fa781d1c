from ripple import Observable, ReactiveObject, ReactiveProperty
from ripple.protocols import ObserveOnlyReactive

# ------------------------------------------------------------------------------------------------

print()
print("=" * 100)
print("Filtering an observable")
print("-" * 100)
print()

# Filters can be stacked; an observer only sees values every filter accepts.
numbers = Observable()
numbers.filter(lambda n: n % 2 == 0).filter(lambda n: n > 5).add_observer(print)

for i in range(10):
    numbers.notify(i)  # Prints 6 and 8

# ------------------------------------------------------------------------------------------------

print()
print("=" * 100)
print("Reactive properties")
print("-" * 100)
print()

count = ReactiveProperty(0)
count.add_observer(lambda n: print(f"notified number: {n}"))
print(f"initial number: {count.value}")

count.set(1)
count.value = 2
count.value += 1

# ------------------------------------------------------------------------------------------------

print()
print("=" * 100)
print("Handing out a read-only view")
print("-" * 100)
print()


# The type checker rejects count.set(...) or assignment to count.value here.
def watch(count: ObserveOnlyReactive[int]) -> None:
    count.add_observer(lambda n: print(f"watched number: {n}"))
    print(f"watching from: {count.value}")


watch(count)
count.set(10)

# ------------------------------------------------------------------------------------------------

print()
print("=" * 100)
print("Nested reactive objects")
print("-" * 100)
print()


def print_tree(children):
    print(f"    vector/direction/x: {children['vector']['direction']['x'].value}")
    print(f"    vector/direction/y: {children['vector']['direction']['y'].value}")
    print(f"    vector/length: {children['vector']['length'].value}")
    print(f"    power: {children['power'].value}")
    print(f"    target: {children['target'].to_unreactive()}")


ship = ReactiveObject(
    {
        "vector": {"direction": {"x": 1, "y": 0}, "length": 5},
        "power": 100,
        "target": ["Alpha", "Bravo"],
    }
)

ship.on_set_value_of.add_observer(
    lambda key: print(f"  <set key {key!r} to {ship[key].to_unreactive()!r}>")
)
ship.on_delete.add_observer(lambda child: print(f"  <deleted {child.to_unreactive()!r}>"))


def on_root(children):
    print("  <root>")
    print_tree(children)


ship.add_observer(on_root)
ship["vector"].add_observer(lambda _: print("  <vector>"))
ship["vector"]["direction"].add_observer(lambda _: print("  <direction>"))
ship["vector"]["direction"]["x"].add_observer(lambda _: print("  <x>"))
ship["target"].add_observer(lambda _: print("  <target>"))

print("(initial object)")
print_tree(ship.value)

print("(set power 200)")
ship.set_value_of("power", 200)

print("(push target Charlie)")
ship["target"].push("Charlie")

print("(replace target)")
ship.set_value_of("target", ["Ash", "Back", "Chain"])

print("(set x of vector direction -1)")
ship["vector"]["direction"]["x"].value = -1

print("(add key 0, then change and delete it)")
ship.set_value_of(0, "zero")
ship.set_value_of(0, "ZERO")
ship.delete(0)

# Every nested level notifies on its own, then the root once more.
print("(replace everything, notifying every level)")
ship.set_with_notifying_all(
    {
        "vector": {"direction": {"x": 0, "y": -1}, "length": 1},
        "power": -100,
        "target": ["Myself"],
    }
)
