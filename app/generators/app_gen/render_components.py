"""React component templates: app shell, header, main content and footer."""
from typing import Dict, Optional

from app.generators.app_gen.catalog import LOCAL_FIRST_DATABASE
from app.generators.app_gen.templates import CodeTemplate
from app.generators.app_gen.types import AppSpecification, InfrastructureSelection
from app.generators.app_gen.utils import ts_string, ts_value


APP_SHELL = CodeTemplate(
    name="App.tsx",
    params=("title",),
    skeleton="""import React, { useEffect } from 'react';
import { Header } from './Header';
import { MainContent } from './MainContent';
import { Footer } from './Footer';

function App() {
  useEffect(() => {
    document.title = @@title;
  }, []);

  return (
    <div className="min-h-screen flex flex-col bg-background text-foreground">
      <Header />
      <MainContent />
      <Footer />
    </div>
  );
}

export default App;
""",
)

HEADER = CodeTemplate(
    name="Header.tsx",
    params=("title", "nav_items"),
    skeleton="""import React from 'react';
import { Button } from '@/components/ui/button';
import { Menu, Sparkles } from 'lucide-react';

const NAV_ITEMS = @@nav_items;

export const Header = () => {
  return (
    <header className="border-b border-border/50 bg-background/80 backdrop-blur-sm sticky top-0 z-50">
      <div className="container mx-auto px-4 py-4">
        <div className="flex items-center justify-between">
          <div className="flex items-center gap-2">
            <Sparkles className="w-8 h-8 text-primary" />
            <span className="text-xl font-bold">{@@title}</span>
          </div>

          <nav className="hidden md:flex items-center gap-6">
            {NAV_ITEMS.map((item) => (
              <a
                key={item.href}
                href={item.href}
                className="text-muted-foreground hover:text-foreground transition-colors"
              >
                {item.label}
              </a>
            ))}
          </nav>

          <Button variant="outline" size="sm" className="md:hidden">
            <Menu className="w-4 h-4" />
          </Button>
        </div>
      </div>
    </header>
  );
};
""",
)

MAIN_CONTENT = CodeTemplate(
    name="MainContent.tsx",
    params=("title", "description", "features", "data_import", "data_hook", "data_section"),
    skeleton="""import React from 'react';
import { Card, CardContent, CardHeader, CardTitle } from '@/components/ui/card';
import { Button } from '@/components/ui/button';
@@data_import
const FEATURES: string[] = @@features;

export const MainContent = () => {
@@data_hook  return (
    <main className="flex-1 container mx-auto px-4 py-12 space-y-16">
      <section id="home" className="text-center space-y-6">
        <h1 className="text-4xl md:text-6xl font-bold">{@@title}</h1>
        <p className="text-xl text-muted-foreground max-w-2xl mx-auto">{@@description}</p>
        <Button size="lg">Get Started</Button>
      </section>

      <section id="features" className="grid gap-6 md:grid-cols-2 lg:grid-cols-3">
        {FEATURES.map((feature) => (
          <Card key={feature}>
            <CardHeader>
              <CardTitle>{feature}</CardTitle>
            </CardHeader>
            <CardContent className="text-muted-foreground">
              {feature} is built into this app.
            </CardContent>
          </Card>
        ))}
      </section>
@@data_section    </main>
  );
};
""",
)

DATA_LISTING_IMPORT = "import { useFireproofData } from '@/hooks/useFireproof';\n"

DATA_LISTING_HOOK = """  const { documents, isLoading } = useFireproofData();

"""

DATA_LISTING_SECTION = """
      <section id="data" className="space-y-4">
        <h2 className="text-2xl font-semibold">Your Data</h2>
        {isLoading ? (
          <p className="text-muted-foreground">Loading...</p>
        ) : documents.length === 0 ? (
          <p className="text-muted-foreground">Nothing saved yet.</p>
        ) : (
          <ul className="divide-y divide-border rounded-md border">
            {documents.map((doc) => (
              <li key={doc._id} className="p-4">
                {doc.title ?? doc.name ?? doc._id}
              </li>
            ))}
          </ul>
        )}
      </section>
"""

FOOTER = CodeTemplate(
    name="Footer.tsx",
    params=("title",),
    skeleton="""import React from 'react';

export const Footer = () => {
  const year = new Date().getFullYear();

  return (
    <footer className="border-t border-border/50 py-6">
      <div className="container mx-auto px-4 text-center text-sm text-muted-foreground">
        &copy; {year} {@@title}. All rights reserved.
      </div>
    </footer>
  );
};
""",
)


def render_app_shell(spec: AppSpecification) -> str:
    return APP_SHELL.render(title=ts_string(spec.title))


def render_header(spec: AppSpecification, infra: Optional[InfrastructureSelection] = None) -> str:
    nav_items = [
        {"label": "Home", "href": "#home"},
        {"label": "Features", "href": "#features"},
    ]
    if infra is not None and infra.database == LOCAL_FIRST_DATABASE:
        nav_items.append({"label": "Data", "href": "#data"})
    return HEADER.render(title=ts_string(spec.title), nav_items=ts_value(nav_items))


def render_main_content(spec: AppSpecification, infra: Optional[InfrastructureSelection] = None) -> str:
    """Main section; the data listing is included only for the local-first database."""
    with_data = infra is not None and infra.database == LOCAL_FIRST_DATABASE
    return MAIN_CONTENT.render(
        title=ts_string(spec.title),
        description=ts_string(spec.description),
        features=ts_value(list(spec.features)),
        data_import=DATA_LISTING_IMPORT if with_data else "",
        data_hook=DATA_LISTING_HOOK if with_data else "",
        data_section=DATA_LISTING_SECTION if with_data else "",
    )


def render_footer(spec: AppSpecification) -> str:
    return FOOTER.render(title=ts_string(spec.title))


def synthesize_components(spec: AppSpecification, infra: Optional[InfrastructureSelection] = None) -> Dict[str, str]:
    """Skeleton components; the four entries are always present."""
    return {
        "App.tsx": render_app_shell(spec),
        "Header.tsx": render_header(spec, infra),
        "MainContent.tsx": render_main_content(spec, infra),
        "Footer.tsx": render_footer(spec),
    }
