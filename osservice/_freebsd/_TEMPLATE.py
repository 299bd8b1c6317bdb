"""Default FreeBSD rc.d script."""

RC_SCRIPT = """#!/bin/sh
#
# PROVIDE: {{ Name }}
# REQUIRE: LOGIN{% for dep in Dependencies %} {{ dep }}{% endfor %}

# KEYWORD: shutdown
#
# {{ Description or DisplayName or Name }}

. /etc/rc.subr

name={{ RcName }}
rcvar={{ RcName }}_enable

load_rc_config $name

: ${ {{- RcName }}_enable:={{ RunAtLoad|yesno }}}

pidfile="/var/run/${name}.pid"
procname={{ Path|cmd }}
command="/usr/sbin/daemon"
command_args="-f -p ${pidfile}{% if KeepAlive %} -r{% endif %}{% if UserName %} -u {{ UserName }}{% endif %} {{ ([Path] + Arguments)|cmdline }}"
{% if WorkingDirectory %}
{{ RcName }}_chdir={{ WorkingDirectory|cmd }}
{% endif %}
{% if EnvVars %}
{{ RcName }}_env={{ EnvVars|dictsort|map("join", "=")|join(" ")|cmd }}
{% endif %}

run_rc_command "$1"
"""
