"""React component template."""


def component_jsx(name: str) -> str:
    return f"""\
import React from 'react';

const {name} = () => {{
  return (
    <div>
      <h1>{name}</h1>
    </div>
  );
}};

export default {name};
"""
