"""
Constants of HTTP header field names.

The list is taken from https://en.wikipedia.org/wiki/List_of_HTTP_header_fields
and covers standard, provisional and common non-standard fields.
"""
import re

_TOKEN = re.compile(r"[!#$%&'*+\-.^_`|~0-9A-Za-z]+")


def is_token(value: str) -> bool:
    """Whether value is a valid RFC 9110 token (header names, methods)."""
    return bool(_TOKEN.fullmatch(value))


def canonical_header_key(name: str) -> str:
    """
    Convert a header name to the Header-Naming-Style, e.g. ``x-custom-value``
    becomes ``X-Custom-Value``.

    A name containing characters that are not valid in a header token is
    returned unchanged.
    """
    if not is_token(name):
        return name
    return "-".join(part[:1].upper() + part[1:].lower() for part in name.split("-"))


# ---- A to G ----

# Acceptable instance-manipulations for the request.
# Request field, Standard, Permanent
A_IM = "A-IM"

# Media type(s) that is/are acceptable for the response. See Content negotiation.
# Request field, Standard, Permanent
ACCEPT = "Accept"

# Character sets that are acceptable.
# Request field, Standard, Permanent
ACCEPT_CHARSET = "Accept-Charset"

# Acceptable version in time.
# Request field, Standard, Provisional
ACCEPT_DATETIME = "Accept-Datetime"

# List of acceptable encodings. See HTTP compression.
# Request field, Standard, Permanent
ACCEPT_ENCODING = "Accept-Encoding"

# List of acceptable human languages for response. See Content negotiation.
# Request field, Standard, Permanent
ACCEPT_LANGUAGE = "Accept-Language"

# Initiates a request for cross-origin resource sharing with Origin.
# Request field, Standard, Permanent
ACCESS_CONTROL_REQUEST_METHOD = "Access-Control-Request-Method"

# Initiates a request for cross-origin resource sharing with Origin.
# Request field, Standard, Permanent
ACCESS_CONTROL_REQUEST_HEADERS = "Access-Control-Request-Headers"

# Authentication credentials for HTTP authentication.
# Request field, Standard, Permanent
AUTHORIZATION = "Authorization"

# Used to specify directives that must be obeyed by all caching mechanisms along the
# request-response chain.
# Request field, Standard, Permanent
CACHE_CONTROL = "Cache-Control"

# Control options for the current connection and list of hop-by-hop request fields.
# Request field, Standard, Permanent
CONNECTION = "Connection"

# The type of encoding used on the data. See HTTP compression.
# Request field, Standard, Permanent
CONTENT_ENCODING = "Content-Encoding"

# The length of the request body in octets (8-bit bytes).
# Request field, Standard, Permanent
CONTENT_LENGTH = "Content-Length"

# A Base64-encoded binary MD5 sum of the content of the request body.
# Request field, Standard, Obsolete
CONTENT_MD5 = "Content-MD5"

# The Media type of the body of the request (used with POST and PUT requests).
# Request field, Standard, Permanent
CONTENT_TYPE = "Content-Type"

# An HTTP cookie previously sent by the server with Set-Cookie.
# Request field, Standard, Permanent: standard
COOKIE = "Cookie"

# Correlates HTTP requests between a client and server.
# Request field, Non-standard
CORRELATION_ID = "Correlation-ID"

# The date and time at which the message was originated (in "HTTP-date" format as defined by RFC
# 9110: HTTP Semantics, section 5.6.7 "Date/Time Formats").
# Request field, Standard, Permanent
DATE = "Date"

# Requests a web application to disable their tracking of a user. This is Mozilla's version of the
# X-Do-Not-Track header field (since Firefox 4.0 Beta 11). Safari and IE9 also have support
# for this field. On March 7, 2011, a draft proposal was submitted to IETF. The W3C Tracking
# Protection Working Group is producing a specification.
# Request field, Non-standard
DNT = "DNT"

# Indicates that particular server behaviors are required by the client.
# Request field, Standard, Permanent
EXPECT = "Expect"

# Disclose original information of a client connecting to a web server through an HTTP proxy.
# Request field, Standard, Permanent
FORWARDED = "Forwarded"

# The email address of the user making the request.
# Request field, Standard, Permanent
FROM = "From"

# # Non-standard header field used by Microsoft applications and load-balancers
# Request field, Non-standard
FRONT_END_HTTPS = "Front-End-Https"

# ---- H to N ----

# The domain name of the server (for virtual hosting), and the TCP port number on which the
# server is listening. The port number may be omitted if the port is the standard port for the
# service requested.
# Request field, Standard
HOST = "Host"

# A request that upgrades from HTTP/1.1 to HTTP/2 MUST include exactly one HTTP2-Setting header
# field. The HTTP2-Settings header field is a connection-specific header field that includes
# parameters that govern the HTTP/2 connection, provided in anticipation of the server accepting the
# request to upgrade.
# Request field, Standard, Permanent
HTTP2_SETTINGS = "HTTP2-Settings"

# Only perform the action if the client supplied entity matches the same entity on the server. This
# is mainly for methods like PUT to only update a resource if it has not been modified since the
# user last updated it.
# Request field, Standard, Permanent
IF_MATCH = "If-Match"

# Allows a 304 Not Modified to be returned if content is unchanged.
# Request field, Standard, Permanent
IF_MODIFIED_SINCE = "If-Modified-Since"

# Allows a 304 Not Modified to be returned if content is unchanged, see HTTP ETag.
# Request field, Standard, Permanent
IF_NONE_MATCH = "If-None-Match"

# If the entity is unchanged, send me the part(s) that I am missing; otherwise, send me the entire
# new entity.
# Request field, Standard, Permanent
IF_RANGE = "If-Range"

# Only send the response if the entity has not been modified since a specific time.
# Request field, Standard, Permanent
IF_UNMODIFIED_SINCE = "If-Unmodified-Since"

# Instance-manipulations applied to the response.
# Response field, Standard, Permanent
IM = "IM"

# The last modified date for the requested object (in "HTTP-date" format as defined by RFC 9110)
# Response field, Standard, Permanent
LAST_MODIFIED = "Last-Modified"

# Limit the number of times the message can be forwarded through proxies or gateways.
# Request field, Standard, Permanent
MAX_FORWARDS = "Max-Forwards"

# Used to express a typed relationship with another resource, where the relation type is defined by
# RFC 5988.
# Response field, Standard, Permanent
LINK = "Link"

# Used in redirection, or when a new resource has been created.
# Response field, Standard, Permanent
LOCATION = "Location"

# Used to configure network request logging.
# Response field, Non-standard
NEL = "NEL"

# ---- O to T ----

# Initiates a request for cross-origin resource sharing (asks server
# for Access-Control-* response fields).
# Request field, Standard, Permanent
ORIGIN = "Origin"

# To allow or disable different features or APIs of the browser.
# Response field, Non-standard
PERMISSIONS_POLICY = "Permissions-Policy"

# Implementation-specific fields that may have various effects anywhere along the request-response
# chain.
# Request field, Response field, Standard, Permanent
PRAGMA = "Pragma"

# Allows client to request that certain behaviors be employed by a server while processing a
# request.
# Request field, Standard, Permanent
PREFER = "Prefer"

# Authorization credentials for connecting to a proxy.
# Request field, Standard, Permanent
PROXY_AUTHORIZATION = "Proxy-Authorization"

# Implemented as a misunderstanding of the HTTP specifications. Common because of mistakes in
# implementations of early HTTP versions. Has exactly the same functionality as standard Connection
# field.
# Request field, Non-standard
PROXY_CONNECTION = "Proxy-Connection"

# This field is supposed to set P3P policy, in the form of P3P:CP="your_compact_policy". However,
# P3P did not take off, most browsers have never fully implemented it, a lot of websites set this
# field with fake policy text, that was enough to fool browsers the existence of P3P policy and
# grant permissions for third party cookies.
# Response field, Standard, Permanent
P3P = "P3P"

# Indicates which Prefer tokens were honored by the server and applied to the processing of the
# request.
# Response field, Standard, Permanent
PREFERENCE_APPLIED = "Preference-Applied"

# Request authentication to access the proxy.
# Response field, Standard, Permanent
PROXY_AUTHENTICATE = "Proxy-Authenticate"

# HTTP Public Key Pinning, announces hash of website's authentic TLS certificate.
# Response field, Standard, Permanent
PUBLIC_KEY_PINS = "Public-Key-Pins"

# Request only part of an entity. Bytes are numbered from 0. See Byte serving.
# Request field, Standard, Permanent
RANGE = "Range"

# This is the address of the previous web page from which a link to the currently requested page was
# followed. (The word "referrer" has been misspelled in the RFC as well as in most implementations
# to the point that it has become standard usage and is considered correct terminology)
# Request field, Standard, Permanent
REFERER = "Referer"

# If an entity is temporarily unavailable, this instructs the client to try again later. Value could
# be a specified period of time (in seconds) or a HTTP-date.
# Response field, Standard, Permanent
RETRY_AFTER = "Retry-After"

# Used in redirection, or when a new resource has been created. This refresh redirects after 5
# seconds. Header extension introduced by Netscape and supported by most web browsers. Defined by
# HTML Standard
# Response field, Non-standard
REFRESH = "Refresh"

# Instructs the user agent to store reporting endpoints for an origin.
# Response field, Non-standard
REPORT_TO = "Report-To"

# The Save-Data client hint request header available in Chrome, Opera, and Yandex browsers lets
# developers deliver lighter, faster applications to users who opt-in to data saving mode in their
# browser.
# Request field, Non-standard
SAVE_DATA = "Save-Data"

# A name for the server.
# Response field, Standard, Permanent
SERVER = "Server"

# An HTTP cookie/
# Response field, Standard, Permanent
SET_COOKIE = "Set-Cookie"

# A HSTS Policy informing the HTTP client how long to cache the HTTPS only policy and whether this
# applies to subdomains.
# Response field, Standard, Permanent
STRICT_TRANSPORT_SECURITY = "Strict-Transport-Security"

# CGI header field specifying the status of the HTTP response. Normal HTTP responses use a
# separate "Status-Line" instead, defined by RFC 9110.
# Response field, Non-standard
STATUS = "Status"

# The transfer encodings the user agent is willing to accept: the same values as for the response
# header field Transfer-Encoding can be used, plus the "trailers" value (related to the "chunked"
# transfer method) to notify the server it expects to receive additional fields in the trailer after
# the last, zero-sized, chunk.
# Request field, Standard, Permanent
TE = "TE"

# The Timing-Allow-Origin response header specifies origins that are allowed to see values of
# attributes retrieved via features of the Resource Timing API, which would otherwise be reported
# as zero due to cross-origin restrictions.
# Response field, Non-standard
TIMING_ALLOW_ORIGIN = "Timing-Allow-Origin"

# The Trailer general field value indicates that the given set of header fields is present in the
# trailer of a message encoded with chunked transfer coding.
# Request field, Response field, Standard, Permanent
TRAILER = "Trailer"

# The form of encoding used to safely transfer the entity to the user. Currently defined
# methods are: chunked, compress, deflate, gzip, identity.
# Request field, Response field, Standard, Permanent
TRANSFER_ENCODING = "Transfer-Encoding"

# Tracking Status header, value suggested to be sent in response to a DNT(do-not-track), possible
# values: - "!" — under construction - "?" — dynamic - "G" — gateway to multiple parties - "N"
# — not tracking - "T" — tracking - "C" — tracking with consent - "P" — tracking only if
# consented - "D" — disregarding DNT - "U" — updated
# Response field, Standard, Permanent
TK = "Tk"

# ---- U to Z ----

# The user agent string of the user agent.
# Request field, Standard, Permanent
USER_AGENT = "User-Agent"

# Ask the server to upgrade to another protocol.
# Request field, Response field, Standard, Permanent
UPGRADE = "Upgrade"

# Tells a server which (presumably in the middle of a HTTP -> HTTPS migration) hosts mixed content
# that the client would prefer redirection to HTTPS and can handle Content-Security-Policy:
# upgrade-insecure-requests Must not be used with HTTP/2
# Request field, Non-standard
UPGRADE_INSECURE_REQUESTS = "Upgrade-Insecure-Requests"

# Tells downstream proxies how to match future request headers to decide whether the cached response
# can be used rather than requesting a fresh one from the origin server.
# Response field, Standard, Permanent
VARY = "Vary"

# Informs the server of proxies through which the request was sent.
# Request field, Response field, Standard, Permanent
VIA = "Via"

# A general warning about possible problems with the entity body.
# Request field,Response field,  Standard, Obsolete
WARNING = "Warning"

# Indicates the authentication scheme that should be used to access the requested entity.
# Response field, Standard, Permanent
WWW_AUTHENTICATE = "WWW-Authenticate"

# Mainly used to identify Ajax requests (most JavaScript frameworks send this field with value
# of XMLHttpRequest); also identifies Android apps using WebView
# Request field, Non-standard
X_REQUESTED_WITH = "X-Requested-With"

# A de facto standard for identifying the originating IP address of a client connecting to a web
# server through an HTTP proxy or load balancer. Superseded by Forwarded header.
# Request field, Non-standard
X_FORWARDED_FOR = "X-Forwarded-For"

# A de facto standard for identifying the original host requested by the client in
# the Host HTTP request header, since the host name and/or port of the reverse proxy (load
# balancer) may differ from the origin server handling the request. Superseded
# by Forwarded header.
# Request field, Non-standard
X_FORWARDED_HOST = "X-Forwarded-Host"

# A de facto standard for identifying the originating protocol of an HTTP request, since a
# reverse proxy (or a load balancer) may communicate with a web server using HTTP even if the
# request to the reverse proxy is HTTPS. An alternative form of the header (X-ProxyUser-Ip) is used
# by Google clients talking to Google servers. Superseded by Forwarded header.
# Request field, Non-standard
X_FORWARDED_PROTO = "X-Forwarded-Proto"

# Requests a web application to override the method specified in the request (typically POST) with
# the method given in the header field (typically PUT or DELETE). This can be used when a user agent
# or firewall prevents PUT or DELETE methods from being sent directly (note that this is either a
# bug in the software component, which ought to be fixed, or an intentional configuration, in which
# case bypassing it may be the wrong thing to do).
# Request field, Non-standard
X_HTTP_METHOD_OVERRIDE = "X-Http-Method-Override"

# Allows easier parsing of the MakeModel/Firmware that is usually found in the User-Agent String of
# AT&T Devices
# Request field, Non-standard
X_ATT_DEVICEID = "X-ATT-DeviceId"

# Links to an XML file on the Internet with a full description and details about the device
# currently connecting. In the example to the right is an XML file for an AT&T Samsung Galaxy S2.
# Request field, Non-standard
X_WAP_PROFILE = "X-Wap-Profile"

# Server-side deep packet insertion of a unique ID identifying customers of Verizon Wireless;
# also known as "perma-cookie" or "supercookie"
# Request field, Non-standard
X_UIDH = "X-UIDH"

# Used to prevent cross-site request forgery. Alternative header names
# are: X-CSRFToken and X-XSRF-TOKEN
# Request field, Non-standard
X_CSRF_TOKEN = "X-Csrf-Token"

# Correlates HTTP requests between a client and server.
# Request field, Response field, Non-standard
X_REQUEST_ID = "X-Request-ID"

# Correlates HTTP requests between a client and server.
# Request field, Response field, Non-standard
X_CORRELATION_ID = "X-Correlation-ID"

# Click-jacking protection: - deny - no rendering within a frame - sameorigin - no rendering if
# origin mismatch - allow-from - allow from specified location, - allowall - non-standard, allow
# from any location
# Response field, Standard, Obsolete
X_FRAME_OPTIONS = "X-Frame-Options"

# Class: Response field, Non-standard
X_CONTENT_SECURITY_POLICY = "X-Content-Security-Policy"

# Class: Response field, Non-standard
X_WEBKIT_CSP = "X-WebKit-CSP"

# Provide the duration of the audio or video in seconds; only supported by Gecko browsers
# Response field, Non-standard
X_CONTENT_DURATION = "X-Content-Duration"

# The only defined value, "nosniff", prevents Internet Explorer from MIME-sniffing a response away
# from the declared content-type. This also applies to Google Chrome, when downloading extensions.
# Response field, Non-standard
X_CONTENT_TYPE_OPTIONS = "X-Content-Type-Options"

# Specifies the technology (e.g. ASP.NET, PHP, JBoss) supporting the web application (version
# details are often in X-Runtime, X-Version, or X-AspNet-Version).
# Response field, Non-standard
X_POWERED_BY = "X-Powered-By"

# Specifies the component that is responsible for a particular redirect.
# Response field, Non-standard
X_REDIRECT_BY = "X-Redirect-By"

# Recommends the preferred rendering engine (often a backward-compatibility mode) to use to display
# the content. Also used to activate Chrome Frame in Internet Explorer. In HTML Standard, only
# the IE=edge value is defined.
# Response field, Non-standard
X_UA_COMPATIBLE = "X-UA-Compatible"

# Cross-site scripting (XSS) filter.
# Response field, Non-standard
X_XSS_PROTECTION = "X-XSS-Protection"

