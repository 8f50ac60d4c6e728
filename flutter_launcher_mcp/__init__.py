"""
Flutter launcher MCP server support code.

Only the SDK discovery helper lives here; the server itself is provided by the
extension runtime.
"""
