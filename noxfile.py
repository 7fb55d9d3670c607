# Copyright © SixtyFPS GmbH <info@slint.dev>
# SPDX-License-Identifier: MIT

import nox

@nox.session(python="3.12")
def python(session: nox.Session):
    session.install(".[test]")
    session.run("pytest", "-s")
