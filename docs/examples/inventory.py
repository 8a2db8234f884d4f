from collections import namedtuple

from arraylist import ArrayList


Item = namedtuple("Item", ["name", "category", "price", "stock"])

inventory = ArrayList.of(
    Item("apple", "fruit", 0.5, 120),
    Item("pear", "fruit", 0.7, 0),
    Item("leek", "vegetable", 1.2, 30),
    Item("carrot", "vegetable", 0.3, 200),
    Item("bread", "bakery", 2.1, 12))

in_stock = inventory.filter(lambda item: item.stock > 0)
print("in stock:", in_stock.map(lambda item: item.name).to_list())

for category, items in inventory.group_by("category").items():
    prices = items.map(lambda item: item.price)
    print("{:<10} {} items, average price {:.2f}".format(
        category, len(items), prices.average()))

print("most stocked:", inventory.max_by(lambda item: item.stock).name)
print("cheapest:", inventory.min_by(lambda item: item.price).name)

# daily picks, three distinct items
print("picks:", inventory.sample(3).map(lambda item: item.name).to_list())

# restock the items that ran out, in place
for item in inventory.filter(lambda item: item.stock == 0):
    inventory.set(inventory.find_last_index(lambda i: i == item),
                  item._replace(stock=50))

print("shelves:", inventory.map(lambda item: item.name).chunked(2).to_list())
