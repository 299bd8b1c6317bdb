"""Default systemd unit."""

SYSTEMD_SCRIPT = """[Unit]
Description={{ Description or DisplayName or Name }}
ConditionFileIsExecutable={{ Path }}
{% for dep in Dependencies %}
Requires={{ dep }}
After={{ dep }}
{% endfor %}

[Service]
StartLimitInterval=5
StartLimitBurst=10
ExecStart={{ Path|cmd }}{% for arg in Arguments %} {{ arg|cmd }}{% endfor %}

{% if WorkingDirectory %}
WorkingDirectory={{ WorkingDirectory }}
{% endif %}
{% if UserName and not UserService %}
User={{ UserName }}
{% endif %}
{% for key, value in EnvVars|dictsort %}
Environment={{ (key ~ "=" ~ value)|cmd }}
{% endfor %}
Restart={{ Restart }}
RestartSec=120

[Install]
WantedBy={{ "default.target" if UserService else "multi-user.target" }}
"""
