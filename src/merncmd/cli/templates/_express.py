"""Express / Mongoose file templates."""


def model_js(name: str) -> str:
    return f"""\
import mongoose from 'mongoose';

const {name}Schema = new mongoose.Schema({{
  // Define your schema here
  name: {{ type: String, required: true }},
  createdAt: {{ type: Date, default: Date.now }},
}});

const {name} = mongoose.model('{name}', {name}Schema);

export default {name};
"""


def controller_js(name: str) -> str:
    # Exports the handlers imported by the generated route file.
    return f"""\
import {name} from '../models/{name}.js';

export const getAll{name}s = async (req, res) => {{
  try {{
    const items = await {name}.find();
    res.json(items);
  }} catch (err) {{
    res.status(500).json({{ message: err.message }});
  }}
}};

export const create{name} = async (req, res) => {{
  try {{
    const item = await {name}.create(req.body);
    res.status(201).json(item);
  }} catch (err) {{
    res.status(400).json({{ message: err.message }});
  }}
}};
"""


def route_js(name: str) -> str:
    return f"""\
import express from 'express';
import {{ getAll{name}s, create{name} }} from '../controllers/{name}.js';

const router = express.Router();

router.get('/', getAll{name}s);
router.post('/', create{name});

export default router;
"""


def middleware_js(name: str) -> str:
    return f"""\
// Middleware boilerplate for {name}

const {name} = (req, res, next) => {{
  // Your middleware logic here
  console.log('{name} middleware triggered');
  next();
}};

export default {name};
"""
