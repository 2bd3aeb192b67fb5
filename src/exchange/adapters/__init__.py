"""
============================

Exchange Adapters.

============================

This package contains adapter implementations for cryptocurrency exchanges.
Adapters translate exchange-specific REST payloads and symbol encodings into
domain models and implement the protocol interfaces defined in the protocols
package.

"""
