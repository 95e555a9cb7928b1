"""PureFood storefront: catalog, cart and cash-on-delivery orders."""
