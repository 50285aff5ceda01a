"""
Ramlink signals - public event API.

Emitted signals:
- customer_provisioned: Emitted by IdentityResolver.resolve_or_create() on first sight
- cart_item_added: Emitted by CartService.add_item()
- favorite_toggled: Emitted by FavoriteService.toggle()
"""

from django.dispatch import Signal

customer_provisioned = Signal()  # sender=Customer, customer, external_id
cart_item_added = Signal()  # sender=Cart, customer, cart, product, quantity
favorite_toggled = Signal()  # sender=Favorite, customer, product, favorited
