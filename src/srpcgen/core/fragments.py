"""Protocol-specific text fragments spliced into templates.

Every fragment kind is a table keyed by ``ProtocolType``. Code fragments fall
back to ``UNKNOWN_TYPE`` so an unsupported protocol shows up in the generated
source; option fragments fall back to an empty string.
"""

from __future__ import annotations

from srpcgen.core.types import ProtocolType, Target

UNKNOWN_TYPE = "Unknown type"

_SERVER_HANDLER: dict[ProtocolType, str] = {
    ProtocolType.HTTP: r"""
    fprintf(stderr, "http server get request_uri: %s\n",
            task->get_req()->get_request_uri());
    print_peer_address<WFHttpTask>(task);

    task->get_resp()->append_output_body("<html>Hello from server!</html>");
""",
    ProtocolType.REDIS: r"""
    protocol::RedisRequest *req   = task->get_req();
    protocol::RedisResponse *resp = task->get_resp();
    protocol::RedisValue val;
    std::string cmd;

    if (req->parse_success() == false || req->get_command(cmd) == false)
        return;

    fprintf(stderr, "redis server get cmd: [%s] from ", cmd.c_str());
    print_peer_address<WFRedisTask>(task);

    val.set_status("OK"); // example: return OK to every requests
    resp->set_result(val);
""",
}

_CLIENT_CALLBACK: dict[ProtocolType, str] = {
    ProtocolType.HTTP: r"""
    if (state == WFT_STATE_SUCCESS) // print server response body
    {
        const void *body;
        size_t body_len;

        task->get_resp()->get_parsed_body(&body, &body_len);
        fwrite(body, 1, body_len, stdout);
        fflush(stdout);
    }
""",
    ProtocolType.REDIS: r"""
    protocol::RedisResponse *resp = task->get_resp();
    protocol::RedisValue val;

    if (state == WFT_STATE_SUCCESS && resp->parse_success() == true)
    {
        resp->get_result(val);
        fprintf(stderr, "response: %s\n", val.string_value().c_str());
    }
""",
}

_CLIENT_REQUEST: dict[ProtocolType, str] = {
    ProtocolType.HTTP: r"""
    protocol::HttpRequest *req = task->get_req();
    req->set_request_uri("/client_request"); // will send to server by proxy
""",
    ProtocolType.REDIS: r"""
    task->get_req()->set_request("SET", {"k1", "v1"});
""",
}

_CLIENT_REDIRECT: dict[Target, dict[ProtocolType, str]] = {
    Target.SOURCE: {
        ProtocolType.HTTP: """
                                                        config.redirect_max(),""",
    },
    Target.CONFIG: {
        ProtocolType.HTTP: """
    "redirect_max": 2,""",
    },
}

_SOURCE_CREDENTIALS = """config.client_user_name() +
                      std::string(":") + config.client_password() +
                      std::string("@") +"""

_CONFIG_CREDENTIALS = ''',
    "user_name": "root",
    "password": ""'''

_CREDENTIALS: dict[Target, dict[ProtocolType, str]] = {
    Target.SOURCE: {
        ProtocolType.REDIS: _SOURCE_CREDENTIALS,
        ProtocolType.MYSQL: _SOURCE_CREDENTIALS,
    },
    Target.CONFIG: {
        ProtocolType.REDIS: _CONFIG_CREDENTIALS,
        ProtocolType.MYSQL: _CONFIG_CREDENTIALS,
    },
}


def server_handler(protocol: ProtocolType) -> str:
    """Body of the generated server's process function."""
    return _SERVER_HANDLER.get(protocol, UNKNOWN_TYPE)


def client_callback(protocol: ProtocolType) -> str:
    """Body of the generated client's task callback."""
    return _CLIENT_CALLBACK.get(protocol, UNKNOWN_TYPE)


def client_request(protocol: ProtocolType) -> str:
    """Statements filling in the generated client's request."""
    return _CLIENT_REQUEST.get(protocol, UNKNOWN_TYPE)


def client_redirect(protocol: ProtocolType, target: Target = Target.SOURCE) -> str:
    """Redirect limit option. Only HTTP follows redirects."""
    return _CLIENT_REDIRECT[target].get(protocol, "")


def credentials(protocol: ProtocolType, target: Target = Target.SOURCE) -> str:
    """User name and password option for protocols that authenticate."""
    return _CREDENTIALS[target].get(protocol, "")
